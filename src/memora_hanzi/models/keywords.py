"""User-editable keyword set."""

from typing import Iterable, Iterator, List


class EditableKeywordSet:
    """Ordered collection of unique keywords.

    Duplicates are detected by exact, case-sensitive comparison; order
    follows insertion.
    """

    def __init__(self, keywords: Iterable[str] = ()):
        self._items: List[str] = []
        self.replace(keywords)

    def replace(self, keywords: Iterable[str]) -> None:
        """Re-seed the set, dropping duplicates and blanks."""
        self._items = []
        for keyword in keywords:
            self.add(keyword)

    def add(self, keyword: str) -> bool:
        """Add a trimmed keyword. Returns False for blanks and duplicates."""
        keyword = keyword.strip()
        if not keyword or keyword in self._items:
            return False
        self._items.append(keyword)
        return True

    def remove(self, keyword: str) -> bool:
        if keyword not in self._items:
            return False
        self._items.remove(keyword)
        return True

    def as_list(self) -> List[str]:
        return list(self._items)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"EditableKeywordSet({self._items!r})"
