from collections.abc import Iterable, Iterator

from intake.domain.requesttype.model.property import Property


class EffectivePropertySet:
    """Ordered, title-keyed view of a request type's own and inherited properties.

    A set is built fresh for each resolution and never persisted. It holds
    references to the stored properties; the owners' own collections are
    never touched.
    """

    def __init__(self, own: Iterable[Property] = ()) -> None:
        self._by_title: dict[str, Property] = {}
        for prop in own:
            self._by_title.setdefault(prop.title, prop)

    def inherit(self, prop: Property) -> bool:
        """Add an ancestor's property unless a closer one has the same title.

        Returns whether the property was added.
        """
        if prop.title in self._by_title:
            return False
        self._by_title[prop.title] = prop
        return True

    def get(self, title: str) -> Property | None:
        return self._by_title.get(title)

    @property
    def titles(self) -> list[str]:
        return list(self._by_title)

    def as_list(self) -> list[Property]:
        return list(self._by_title.values())

    def __iter__(self) -> Iterator[Property]:
        return iter(self._by_title.values())

    def __len__(self) -> int:
        return len(self._by_title)

    def __contains__(self, title: object) -> bool:
        return title in self._by_title

    def __repr__(self) -> str:
        return f"EffectivePropertySet({self.titles!r})"
