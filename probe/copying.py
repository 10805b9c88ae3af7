"""Working-copy construction for probed containers"""
import copy
import logging
import types
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

Copier = Callable[[Any], Any]

# Types whose copy may legitimately be the original object
IMMUTABLE_BUILTINS = (tuple, str, bytes, frozenset, range)

_SAMPLE = {None: None}

_copiers: Dict[type, Copier] = {
    types.MappingProxyType: lambda proxy: types.MappingProxyType(dict(proxy)),
    type(_SAMPLE.keys()): lambda view: dict.fromkeys(view).keys(),
    type(_SAMPLE.values()): lambda view: dict(enumerate(view)).values(),
    type(_SAMPLE.items()): lambda view: dict(view).items(),
}


def register_copier(container_type: type, copier: Copier) -> None:
    """Register a copier for containers of exactly ``container_type``"""
    if not callable(copier):
        raise ValueError("Copier must be callable")
    _copiers[container_type] = copier
    logger.debug(f"Registered working-copy copier for {container_type.__name__}")


def get_copier(container_type: type) -> Optional[Copier]:
    """Get the copier registered for an exact type, if any"""
    return _copiers.get(container_type)


def has_copier(container_type: type) -> bool:
    """Check if a dedicated copier is registered for an exact type"""
    return container_type in _copiers


def _element_memo(container: Any) -> Dict[int, Any]:
    """Pre-seed a deepcopy memo so elements keep their identity"""
    memo: Dict[int, Any] = {}
    if isinstance(container, Mapping):
        for key, value in container.items():
            if key is not container:
                memo[id(key)] = key
            if value is not container:
                memo[id(value)] = value
    else:
        for element in container:
            if element is not container:
                memo[id(element)] = element
    return memo


def _rebuild(container: Any) -> Any:
    """Build a copy through the type's constructor, which takes the elements"""
    return type(container)(container)


def working_copy(container: Any) -> Any:
    """Build a disposable duplicate of ``container`` holding the same elements.

    The container's own structure is duplicated while every element is shared
    with the original, so mutating the duplicate never reaches the caller.
    Containers that deepcopy cannot handle (a sequence guarding its storage
    with a lock, for example) are rebuilt through their constructor instead.
    Raises ``ValueError`` when the only available duplicate is the original
    object itself and the type is not a known immutable builtin.
    """
    copier = get_copier(type(container))
    if copier is not None:
        duplicate = copier(container)
    else:
        try:
            duplicate = copy.deepcopy(container, _element_memo(container))
        except Exception as e:
            logger.debug(f"deepcopy of {type(container).__name__} failed ({e}), rebuilding from elements")
            try:
                duplicate = _rebuild(container)
            except Exception:
                raise e

    if duplicate is container and not isinstance(container, IMMUTABLE_BUILTINS):
        raise ValueError(f"copying {type(container).__name__} returned the original object")

    return duplicate
