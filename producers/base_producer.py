"""Base step producer with shared input handling."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Mapping, Optional

from algoplay.config import PlaybackConfig
from steps import Step, StepSequence


class BaseProducer(ABC):
    """
    Base class for step producers.

    A producer turns validated algorithm input into an ordered, deterministic
    stream of steps. Validation happens in `parse` and always completes before
    the first step is generated.
    """

    name = ""
    title = ""
    fields = ("array",)  # Input fields; the first one is the primary field

    def __init__(self, config: Optional[PlaybackConfig] = None):
        """
        Initialize producer.

        Args:
            config: Configuration object (input bounds, lazy production)
        """
        self.config = config if config is not None else PlaybackConfig()

    @property
    def primary_field(self) -> str:
        return self.fields[0]

    def normalize(self, raw_input: Any) -> Dict[str, Any]:
        """Turn raw input into a field mapping; bare values fill the primary field."""
        if isinstance(raw_input, Mapping):
            return {key: raw_input.get(key) for key in self.fields}
        fields = {key: None for key in self.fields}
        fields[self.primary_field] = raw_input
        return fields

    def produce(self, raw_input: Any):
        """
        Validate input and build the step sequence.

        Args:
            raw_input: Field mapping, or a bare value for the primary field

        Returns:
            StepSequence for this run

        Raises:
            ValidationError: if the input is invalid (no steps are produced)
        """
        parsed = self.parse(self.normalize(raw_input))
        return StepSequence(
            self.generate(parsed),
            initial=self.initial_state(parsed),
            name=self.name,
            lazy=self.config.lazy_steps,
        )

    @abstractmethod
    def parse(self, fields: Dict[str, Any]) -> Any:
        """
        Validate raw fields.

        Args:
            fields: Raw field values keyed by field name

        Returns:
            parsed: Producer-specific parsed input
        """
        pass

    @abstractmethod
    def initial_state(self, parsed: Any) -> Dict[str, Any]:
        """Structure rendered before the first step is applied."""
        pass

    @abstractmethod
    def generate(self, parsed: Any) -> Iterator[Step]:
        """Yield steps for parsed input, starting with START and ending terminal."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
