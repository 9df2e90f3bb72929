"""Pydantic schemas for runtime validation of CLI inputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

ADAPTER_SEPARATOR = ":"


class AdapterMapping(BaseModel):
    """A single ``source:target`` front-matter key rename."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: str = Field(min_length=1)
    target: str = Field(min_length=1)

    @classmethod
    def parse(cls, value: str) -> AdapterMapping:
        """Parse ``source:target``, splitting on the first separator.

        Raises
        ------
        ValueError
            If the separator is missing, leading or trailing, or either side
            is blank.
        """
        index = value.find(ADAPTER_SEPARATOR)
        if index <= 0 or index == len(value) - 1:
            raise ValueError(
                f'Invalid adapter mapping "{value}". Use the form "source:target".'
            )
        source = value[:index].strip()
        target = value[index + 1 :].strip()
        if not source or not target:
            raise ValueError(
                f'Invalid adapter mapping "{value}". Source and target cannot be empty.'
            )
        return cls(source=source, target=target)


class CliOptions(BaseModel):
    """Fully parsed command-line invocation."""

    model_config = ConfigDict(extra="forbid")

    input: str = "./"
    deep: bool = False
    adapter: dict[str, str] = Field(default_factory=dict)
    output: str | None = None
    help_requested: bool = False
