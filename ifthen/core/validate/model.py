# ifthen/core/validate/model.py
"""
Host model contract and a reference implementation.

Validators only need the error API below. FormModel is a minimal host that
implements it; any object exposing the same methods works.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class ErrorHost(Protocol):
    """Error API consumed by validators and the conditional evaluator"""

    def get_errors(self, attribute: Optional[str] = None) -> Dict[str, List[str]]:
        ...

    def clear_errors(self, attribute: Optional[str] = None) -> None:
        ...

    def add_errors(self, errors: Mapping[str, Any]) -> None:
        ...

    def has_errors(self, attribute: Optional[str] = None) -> bool:
        ...


class FormModel:
    """
    Reference host model.

    Public instance attributes are the model's fields. Works as a plain base
    class or as the base of a dataclass:

        @dataclass
        class Contact(FormModel):
            type: int = 0
            phone: str = ""
    """

    @property
    def _errors(self) -> Dict[str, List[str]]:
        return self.__dict__.setdefault("_error_state", {})

    # -------- fields --------

    def attribute_values(self) -> Dict[str, Any]:
        """Snapshot of field values (used for compiled-rule fingerprints)"""
        return {
            k: v for k, v in vars(self).items()
            if not k.startswith("_")
        }

    def get_attribute_label(self, attribute: str) -> str:
        """'first_name' -> 'First Name'"""
        return " ".join(p.capitalize() for p in attribute.replace("-", "_").split("_") if p)

    def form_name(self) -> str:
        """Name prefix of rendered form fields"""
        return type(self).__name__

    # -------- errors --------

    def get_errors(self, attribute: Optional[str] = None) -> Dict[str, List[str]]:
        """Copy of the error state (optionally for one attribute)"""
        if attribute is not None:
            if attribute not in self._errors:
                return {}
            return {attribute: list(self._errors[attribute])}
        return {k: list(v) for k, v in self._errors.items()}

    def add_error(self, attribute: str, message: str) -> None:
        self._errors.setdefault(attribute, []).append(message)

    def add_errors(self, errors: Mapping[str, Any]) -> None:
        """Append messages; values may be a single message or a list"""
        for attribute, messages in errors.items():
            if isinstance(messages, (list, tuple)):
                for message in messages:
                    self.add_error(attribute, message)
            else:
                self.add_error(attribute, messages)

    def clear_errors(self, attribute: Optional[str] = None) -> None:
        if attribute is None:
            self._errors.clear()
        else:
            self._errors.pop(attribute, None)

    def has_errors(self, attribute: Optional[str] = None) -> bool:
        if attribute is None:
            return any(self._errors.values())
        return bool(self._errors.get(attribute))


def model_type_name(model: Any) -> str:
    return type(model).__name__


def attribute_snapshot(model: Any) -> Dict[str, Any]:
    """
    Field snapshot of an arbitrary host model.

    Prefers attribute_values(); falls back to public instance attributes.
    """
    getter = getattr(model, "attribute_values", None)
    if callable(getter):
        return dict(getter())
    try:
        return {k: v for k, v in vars(model).items() if not k.startswith("_")}
    except TypeError:
        return {}


def attribute_label(model: Any, attribute: str) -> str:
    getter = getattr(model, "get_attribute_label", None)
    if callable(getter):
        return getter(attribute)
    return FormModel.get_attribute_label(model, attribute)
