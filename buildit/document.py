"""
Typed lookups into an already parsed configuration tree (usually `json.load` output)

Every accessor answers `None` when the key is missing or holds a value of
an unexpected shape, so callers only ever deal with optional typed values.
"""
import logging
from typing import Any
from typing import Dict
from typing import List
from typing import Mapping
from typing import Optional
from typing import Tuple

from buildit.errors.parser import UnrecognizedConfiguration
from buildit.settings import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)

MISSING = object()


def _is_scalar(value: Any) -> bool:
    # bool is an int subclass but `true` is never a sensible header or query value
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


class Document:
    def __init__(self, tree: Mapping[str, Any]):
        self._tree = tree

    @classmethod
    def wrap(cls, tree: Any) -> Optional["Document"]:
        if isinstance(tree, Document):
            return tree
        if not isinstance(tree, Mapping):
            if tree is not None:
                log.debug(str(UnrecognizedConfiguration("<document>", tree)))
            return None
        return cls(tree)

    def _lookup(self, key: str) -> Any:
        return self._tree.get(key, MISSING)

    def _ignore(self, key: str, value: Any) -> None:
        log.debug(str(UnrecognizedConfiguration(key, value)))

    def __contains__(self, key: str) -> bool:
        return key in self._tree

    def string(self, key: str) -> Optional[str]:
        value = self._lookup(key)
        if value is MISSING:
            return None
        if not isinstance(value, str):
            self._ignore(key, value)
            return None
        return value

    def scalar(self, key: str) -> Optional[str]:
        value = self._lookup(key)
        if value is MISSING:
            return None
        if not _is_scalar(value):
            self._ignore(key, value)
            return None
        return str(value)

    def node(self, key: str) -> Optional["Document"]:
        value = self._lookup(key)
        if value is MISSING:
            return None
        if not isinstance(value, Mapping):
            self._ignore(key, value)
            return None
        return Document(value)

    def mapping(self, key: str) -> Optional[Dict[str, str]]:
        """
        Flat `{name: value}` object, e.g. the `headers` section.
        """
        value = self._lookup(key)
        if value is MISSING:
            return None
        if not isinstance(value, Mapping) or not all(
            isinstance(name, str) and _is_scalar(item) for name, item in value.items()
        ):
            self._ignore(key, value)
            return None
        return {name: str(item) for name, item in value.items()}

    def pairs(self, key: str) -> Optional[List[Tuple[str, str]]]:
        """
        Sequence of single-key objects, e.g. `[{"page": "2"}, {"per_page": "100"}]`.
        """
        value = self._lookup(key)
        if value is MISSING:
            return None
        if not isinstance(value, (list, tuple)):
            self._ignore(key, value)
            return None

        pairs = []
        for entry in value:
            if not (isinstance(entry, Mapping) and len(entry) == 1):
                self._ignore(key, value)
                return None
            ((name, item),) = entry.items()
            if not (isinstance(name, str) and _is_scalar(item)):
                self._ignore(key, value)
                return None
            pairs.append((name, str(item)))
        return pairs

    def __repr__(self):
        return f"<Document {sorted(self._tree)}>"
