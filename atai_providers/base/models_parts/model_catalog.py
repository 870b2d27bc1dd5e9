"""
Immutable catalog of model-level configs with a single active pointer.

The "at most one active model" invariant lives here, in the setter, instead of
being spread across an ``is_active`` flag on every record. Every mutation
returns a new catalog.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, Optional, Tuple

from .provider_config import AIModelConfig


@dataclass(frozen=True)
class ModelCatalog:
    """Ordered model configs plus the id of the active one.

    Attributes:
        models: Model configs in display order; ids are unique.
        active_id: Id of the active model, or ``None`` when nothing is active.
    """

    models: Tuple[AIModelConfig, ...] = ()
    active_id: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.models, tuple):
            object.__setattr__(self, "models", tuple(self.models))
        if self.active_id is not None and self.get(self.active_id) is None:
            object.__setattr__(self, "active_id", None)

    @classmethod
    def of(cls, models: Iterable[AIModelConfig], active_id: Optional[str] = None) -> "ModelCatalog":
        return cls(models=tuple(models), active_id=active_id)

    def __iter__(self) -> Iterator[AIModelConfig]:
        return iter(self.models)

    def __len__(self) -> int:
        return len(self.models)

    def get(self, model_id: str) -> Optional[AIModelConfig]:
        return next((m for m in self.models if m.id == model_id), None)

    def active(self) -> Optional[AIModelConfig]:
        """Resolve the active pointer by lookup."""
        return self.get(self.active_id) if self.active_id else None

    def set_active(self, model_id: str) -> "ModelCatalog":
        """Return a catalog whose active model is ``model_id``.

        Raises:
            KeyError: If no model with ``model_id`` exists.
        """
        if self.get(model_id) is None:
            raise KeyError(f"Unknown model id '{model_id}'")
        return replace(self, active_id=model_id)

    def add(self, model: AIModelConfig) -> "ModelCatalog":
        """Append ``model`` (replacing one with the same id).

        The new model becomes active when nothing was active before.
        """
        models = tuple(m for m in self.models if m.id != model.id) + (model,)
        active_id = self.active_id if self.active_id else model.id
        return ModelCatalog(models=models, active_id=active_id)

    def update(self, model: AIModelConfig) -> "ModelCatalog":
        """Replace the model sharing ``model.id`` in place, keeping order."""
        if self.get(model.id) is None:
            raise KeyError(f"Unknown model id '{model.id}'")
        models = tuple(model if m.id == model.id else m for m in self.models)
        return replace(self, models=models)

    def remove(self, model_id: str) -> "ModelCatalog":
        """Drop ``model_id``; if it was active, the first remaining model takes over."""
        models = tuple(m for m in self.models if m.id != model_id)
        active_id = self.active_id
        if active_id == model_id:
            active_id = models[0].id if models else None
        return ModelCatalog(models=models, active_id=active_id)

    def enabled(self) -> Tuple[AIModelConfig, ...]:
        return tuple(m for m in self.models if m.enabled)


__all__ = ["ModelCatalog"]
