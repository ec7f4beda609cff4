"""Map schema categories onto menu choices and a default position."""

from dataclasses import dataclass

from initializr.schema import DependencyEntry, SchemaCategory, SchemaDocument


@dataclass(frozen=True)
class ResolvedOptions:
    """Menu-ready view of a category, in server order.

    ids and display_names are parallel. default_index is None when the
    declared default matched no entry; callers treat that as index 0.
    """

    ids: tuple[str, ...]
    display_names: tuple[str, ...]
    default_index: int | None = None

    @property
    def initial_index(self) -> int:
        return self.default_index if self.default_index is not None else 0


def resolve_category(category: SchemaCategory) -> ResolvedOptions:
    """Project entries in order and locate the default id (whitespace-insensitive)."""
    wanted = category.default_id.strip()
    default_index: int | None = None
    if wanted:
        for i, entry in enumerate(category.entries):
            if entry.id.strip() == wanted:
                default_index = i
                break
    return ResolvedOptions(
        ids=tuple(e.id for e in category.entries),
        display_names=tuple(e.display_name for e in category.entries),
        default_index=default_index,
    )


def resolve(document: SchemaDocument, category_key: str) -> ResolvedOptions:
    """Resolve one single-select category of document. Raises SchemaError."""
    return resolve_category(document.category(category_key))


def resolve_dependencies(document: SchemaDocument) -> list[DependencyEntry]:
    """Flatten dependency groups into one list, keeping group and member order.

    Group names are carried on each entry, never as entries of their own.
    Raises SchemaError only if the dependencies category itself is bad.
    """
    out: list[DependencyEntry] = []
    for group in document.dependency_category().groups:
        for entry in group.values:
            out.append(entry.model_copy(update={"group": group.name}))
    return out
