"""Generator settings consumed while building template contexts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class GeneratorTweak(Enum):
    """Optional behaviors of the generator that are toggled per run."""

    ADD_CLOSEABLE_INTERFACE = "add_closeable_interface"
    EXTEND_RUNTIME_EXCEPTION = "extend_runtime_exception"
    ADD_THRIFT_EXCEPTION = "add_thrift_exception"
    USE_PLAIN_JAVA_NAMESPACE = "use_plain_java_namespace"
    FALLBACK_TO_PLAIN_JAVA_NAMESPACE = "fallback_to_plain_java_namespace"

    @classmethod
    def from_name(cls, name: str) -> GeneratorTweak:
        """Look up a tweak by name, ignoring case and accepting dashes for underscores.

        Args:
            name (str): E.g. `ADD_CLOSEABLE_INTERFACE` or `add-closeable-interface`.

        Returns:
            GeneratorTweak: The matching tweak.

        Raises:
            ValueError: If there is no tweak of that name.
        """
        normalized = name.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(tweak.value for tweak in cls)
            raise ValueError(f"Unknown generator tweak '{name}'. Valid tweaks: {valid}") from None


@dataclass(frozen=True)
class GeneratorConfig:
    """Read-only settings of a generation run.

    Attributes:
        default_package: The Java package used when a Thrift file declares no namespace.
        tweaks: The enabled tweaks.
    """

    default_package: str | None = None
    tweaks: frozenset[GeneratorTweak] = field(default_factory=frozenset)

    def contains_tweak(self, tweak: GeneratorTweak) -> bool:
        return tweak in self.tweaks

    @classmethod
    def from_tweak_names(cls, names: Iterable[str], default_package: str | None = None) -> GeneratorConfig:
        """Create a config from tweak names, e.g. as given on a command line.

        Args:
            names (Iterable[str]): The tweak names.
            default_package (str | None, optional): The default Java package. Defaults to None.

        Returns:
            GeneratorConfig: The config.
        """
        return cls(default_package, frozenset(GeneratorTweak.from_name(name) for name in names))
