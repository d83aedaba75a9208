"""Model class name resolution and lookup."""

import importlib
import inspect
import logging
from typing import Dict, Optional, Type

from sqlalchemy import inspect as sa_inspect

from .errors import ClassNotFoundError
from .models import ENTITY_METADATA_ACCESSORS, DescribableModel, EntityMetadata

logger = logging.getLogger(__name__)

NAMESPACE_SEPARATOR = "."
DEFAULT_MODEL_NAMESPACE = "app.models"


def parse_class_name(class_name: str, default_namespace: Optional[str] = None) -> str:
    """Returns the fully qualified class name.

    Names starting with the namespace separator are already fully
    qualified and are returned unchanged. Anything else is placed in
    the default namespace.
    """
    if class_name.startswith(NAMESPACE_SEPARATOR):
        return class_name

    namespace = default_namespace or DEFAULT_MODEL_NAMESPACE
    return f"{namespace}{NAMESPACE_SEPARATOR}{class_name}"


def is_describable(obj) -> bool:
    """Whether obj is a concrete class implementing EntityMetadata.

    Every accessor must be overridden, and DescribableModel subclasses
    must be mapped (not the mixin itself, not __abstract__ bases).
    """
    if not inspect.isclass(obj) or not issubclass(obj, EntityMetadata):
        return False
    if obj in (EntityMetadata, DescribableModel) or inspect.isabstract(obj):
        return False
    if any(getattr(obj, name) is getattr(EntityMetadata, name) for name in ENTITY_METADATA_ACCESSORS):
        return False
    if issubclass(obj, DescribableModel):
        return sa_inspect(obj, raiseerr=False) is not None
    return True


class ModelRegistry:
    """Maps class names to describable model classes.

    Explicitly registered classes are looked up first; other names are
    imported as ``package.module.ClassName``.
    """

    def __init__(self, import_fallback: bool = True):
        self.import_fallback = import_fallback
        self._models: Dict[str, Type[EntityMetadata]] = {}

    def register(self, model_class=None, name: Optional[str] = None):
        """Register a model class under its qualified name (or name).

        Can be used directly or as a class decorator.
        """
        def decorator(cls):
            if not is_describable(cls):
                raise TypeError(f"{cls!r} does not implement EntityMetadata")
            key = name or f"{cls.__module__}{NAMESPACE_SEPARATOR}{cls.__qualname__}"
            self._models[key.lstrip(NAMESPACE_SEPARATOR)] = cls
            return cls

        if model_class is None:
            return decorator
        return decorator(model_class)

    def __contains__(self, name: str) -> bool:
        return name.lstrip(NAMESPACE_SEPARATOR) in self._models

    def load(self, name: str) -> Type[EntityMetadata]:
        """Load a describable model class by fully qualified name.

        Raises:
            ClassNotFoundError: if the name does not resolve to a class
                implementing EntityMetadata
        """
        key = name.lstrip(NAMESPACE_SEPARATOR)
        if key in self._models:
            return self._models[key]
        if not self.import_fallback:
            raise ClassNotFoundError(name, reason="not registered")

        module_name, _, attribute = key.rpartition(NAMESPACE_SEPARATOR)
        if not module_name or not attribute:
            raise ClassNotFoundError(name, reason="not a qualified name")

        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            # A missing dependency of an existing module is not our miss
            if e.name and not (module_name == e.name or module_name.startswith(e.name + NAMESPACE_SEPARATOR)):
                raise
            logger.debug("Cannot import %s: %s", module_name, e)
            raise ClassNotFoundError(name, reason=str(e)) from e

        model_class = getattr(module, attribute, None)
        if model_class is None:
            raise ClassNotFoundError(name, reason=f"{module_name} has no attribute {attribute}")
        if not is_describable(model_class):
            raise ClassNotFoundError(name, reason="not a describable model class")

        logger.debug("Loaded %s from %s", attribute, module.__name__)
        return model_class


# Global registry instance
registry = ModelRegistry()
