"""Answers collected during one wizard run."""

from dataclasses import dataclass, field


@dataclass
class AnswerSet:
    """One value per wizard step. Steps that could not run leave their field empty."""

    language: str = ""
    build_system: str = ""
    boot_version: str = ""
    group: str = ""
    name: str = ""
    description: str = ""
    version: str = ""
    packaging: str = ""
    java_version: str = ""
    dependencies: list[str] = field(default_factory=list)
