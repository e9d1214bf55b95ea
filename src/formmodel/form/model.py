# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Form model: an HTML form's data, validation state and presentation.

A form model is a mutable pydantic model whose declared fields are the form's
attributes. Raw input (typically submitted form fields) is bound through
`load()`/`set_attribute()`, which cast each value to the attribute's declared
scalar type. Validation is performed elsewhere; its per-attribute result is
handed back through `process_validation_result()` and kept as error strings.

Nested forms are attributes whose declared type is itself a FormModel. They
are addressed with dotted paths:

    class Address(FormModel):
        city: str = ""

    class Signup(FormModel):
        email: str = ""
        address: Address = Field(default_factory=Address)

    form = Signup()
    form.set_attribute("address.city", "Lisbon")
    form.get_attribute_value("address.city")  # "Lisbon"
    form.get_attribute_label("address.city")  # "City"
"""

from __future__ import annotations

import logging
from typing import (
    Any,
    ClassVar,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from pydantic import BaseModel, ConfigDict, PrivateAttr, PydanticUserError

from ..exceptions import AccessError, ConfigurationError
from ..primitives import BindingSettings, Model, ScalarKind, coerce, is_optional
from ..utils.inflector import humanize
from ..validation import HtmlOptionsProvider, Required, ValidationResult
from .attributes import collect_attributes, is_nested_model_type

logger = logging.getLogger(__name__)

NESTED_SEPARATOR = "."

# pydantic error codes raised for class attributes declared without a type annotation
_MISSING_ANNOTATION_CODES = frozenset(
    {"model-field-missing-annotation", "model-field-overridden"}
)


class FormModelMetaclass(type(BaseModel)):
    """Reports attributes declared without a type annotation as ConfigurationError."""

    def __new__(mcs, cls_name, bases, namespace, **kwargs):
        try:
            return super().__new__(mcs, cls_name, bases, namespace, **kwargs)
        except PydanticUserError as e:
            if e.code not in _MISSING_ANNOTATION_CODES:
                raise
            raise ConfigurationError(
                f'You must specify the type hint for every attribute of the "{cls_name}" '
                f"form model. {e.message}"
            ) from e


class FormModel(Model, metaclass=FormModelMetaclass):
    """
    Base class for form models.

    Declare attributes as annotated fields with defaults so an empty form can
    be constructed and filled from input later. Override `get_rules()`,
    `get_attribute_labels()` and `get_attribute_hints()` to describe
    validation and presentation. Pass `form_name=` as a class keyword to
    change the scope under which `load()` looks for submitted values.
    """

    model_config = ConfigDict(frozen=False)

    binding_settings: ClassVar[BindingSettings] = BindingSettings()
    _form_name: ClassVar[Optional[str]] = None

    _attributes: Mapping[str, Any] = PrivateAttr(default_factory=dict)
    _attribute_labels: Dict[str, str] = PrivateAttr(default_factory=dict)
    _attribute_errors: Dict[str, List[str]] = PrivateAttr(default_factory=dict)
    _validated: bool = PrivateAttr(default=False)

    def __init_subclass__(cls, form_name: Optional[str] = None, **kwargs):
        super().__init_subclass__(**kwargs)
        cls._form_name = form_name

    def model_post_init(self, context: Any, /) -> None:
        super().model_post_init(context)
        self._attributes = collect_attributes(type(self))
        self._attribute_labels = dict(self.get_attribute_labels())

    # ------------------------------------------------------------------
    # Attribute metadata
    # ------------------------------------------------------------------

    def get_attribute_types(self) -> Mapping[str, Any]:
        """Declared type of each attribute, indexed by attribute name."""
        return self._attributes

    def has_attribute(self, attribute: str) -> bool:
        return attribute in self._attributes

    def is_attribute_required(self, attribute: str) -> bool:
        """
        Whether the rules attached to an attribute make it mandatory.

        True when any rule is a `Required` marker, or provides HTML options
        with a truthy "required" entry.
        """
        for rule in self.get_rules().get(attribute, ()):
            if isinstance(rule, Required):
                return True
            if isinstance(rule, HtmlOptionsProvider) and bool(
                rule.get_html_options().get("required", False)
            ):
                return True
        return False

    def get_rules(self) -> Dict[str, Sequence[Any]]:
        """Validation rules per attribute, consumed by an external validator."""
        return {}

    def get_attribute_labels(self) -> Dict[str, str]:
        """
        Explicit attribute labels, indexed by attribute name.

        Defaults to the titles declared with `Field(title=...)`. Attributes
        without an explicit label get one generated from their name.
        """
        return {
            name: field.title
            for name, field in type(self).model_fields.items()
            if field.title
        }

    def get_attribute_label(self, attribute: str) -> str:
        if attribute in self._attribute_labels:
            return self._attribute_labels[attribute]

        attribute, nested = self._get_nested_attribute(attribute)
        if nested is not None:
            return self._read_nested_model(attribute).get_attribute_label(nested)
        return humanize(attribute)

    def get_attribute_hints(self) -> Dict[str, str]:
        """Attribute hints, defaulting to descriptions declared with `Field(description=...)`."""
        return {
            name: field.description
            for name, field in type(self).model_fields.items()
            if field.description
        }

    def get_attribute_hint(self, attribute: str) -> str:
        attribute, nested = self._get_nested_attribute(attribute)
        if nested is not None:
            return self._read_nested_model(attribute).get_attribute_hint(nested)
        return self.get_attribute_hints().get(attribute, "")

    def get_form_name(self) -> str:
        """
        Scope under which `load()` expects this form's values.

        Returns the `form_name` class keyword when given, otherwise the class
        name without its module, or an empty string for a nameless class.
        """
        if self._form_name is not None:
            return self._form_name
        return type(self).__name__

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def get_attribute_value(self, attribute: str) -> Any:
        return self._read_property(attribute)

    def set_attribute(self, name: str, value: Any) -> None:
        """
        Cast a raw value to the attribute's declared type and assign it.

        Only the declared type of the top-level attribute selects the cast;
        a dotted path is then delegated to the nested form, which applies its
        own. Names that are not attributes of this form are ignored.
        """
        real_name, _ = self._get_nested_attribute(name)
        if real_name not in self._attributes:
            logger.debug(f"{type(self).__name__}: ignoring unknown attribute '{name}'")
            return

        declared = self._attributes[real_name]
        if value is None and is_optional(declared):
            self._write_property(name, None)
            return

        kind = ScalarKind.from_annotation(declared)
        self._write_property(name, coerce(kind, value, self.binding_settings))

    def load(self, data: Mapping[str, Any], form_name: Optional[str] = None) -> bool:
        """
        Populate the form from submitted data.

        Args:
            data: Submitted data, usually the parsed request body
            form_name: Key under which this form's values sit in `data`.
                Defaults to get_form_name(). With an empty scope the whole
                of `data` is bound.

        Returns:
            True if any values were found for this form
        """
        scope = form_name if form_name is not None else self.get_form_name()

        values: Mapping[str, Any] = {}
        if scope == "" and data:
            values = data
        elif data.get(scope) is not None:
            values = data[scope]

        if not isinstance(values, Mapping):
            logger.warning(
                f"{type(self).__name__}: expected a mapping under '{scope}', "
                f"got {type(values).__name__}; nothing loaded"
            )
            return False

        for name, value in values.items():
            if not isinstance(name, str):
                logger.debug(f"{type(self).__name__}: ignoring non-string key {name!r}")
                continue
            self.set_attribute(name, value)

        logger.debug(f"{type(self).__name__}: loaded {len(values)} value(s) from scope '{scope}'")
        return len(values) > 0

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------

    def add_error(self, attribute: str, error: str) -> None:
        self._attribute_errors.setdefault(attribute, []).append(error)

    def clear_errors(self, attribute: Optional[str] = None) -> None:
        """Remove errors of one attribute, or all of them. Always resets the validated flag."""
        if attribute is None:
            self._attribute_errors = {}
        else:
            self._attribute_errors.pop(attribute, None)

        self._validated = False

    def get_error(self, attribute: str) -> List[str]:
        return list(self._attribute_errors.get(attribute, []))

    def get_errors(self) -> Dict[str, List[str]]:
        return {attribute: list(errors) for attribute, errors in self._attribute_errors.items()}

    def get_error_summary(self, show_all_errors: bool) -> List[str]:
        """
        Flatten errors into a single list.

        Args:
            show_all_errors: If True, every error of every attribute; otherwise
                only the first error of each attribute

        Returns:
            Error messages in attribute order
        """
        if not show_all_errors:
            return list(self.get_first_errors().values())

        lines: List[str] = []
        for errors in self._attribute_errors.values():
            lines.extend(errors)
        return lines

    def get_first_error(self, attribute: str) -> str:
        errors = self._attribute_errors.get(attribute)
        if not errors:
            return ""
        return errors[0]

    def get_first_errors(self) -> Dict[str, str]:
        return {
            attribute: errors[0]
            for attribute, errors in self._attribute_errors.items()
            if errors
        }

    def has_errors(self, attribute: Optional[str] = None) -> bool:
        if attribute is None:
            return bool(self._attribute_errors)
        return attribute in self._attribute_errors

    def is_validated(self) -> bool:
        return self._validated

    def process_validation_result(
        self,
        result_set: Union[
            Iterable[Tuple[str, ValidationResult]], Mapping[str, ValidationResult]
        ],
    ) -> None:
        """
        Replace the form's errors with those of a validator's result set.

        Accepts any iterable of (attribute, result) pairs, such as a ResultSet,
        or a mapping of attribute to result. Errors from a previous cycle are
        discarded first.
        """
        self.clear_errors()

        pairs = result_set.items() if isinstance(result_set, Mapping) else result_set
        for attribute, result in pairs:
            if not result.is_valid():
                self._add_errors({attribute: result.get_errors()})

        self._validated = True
        logger.debug(
            f"{type(self).__name__}: validation processed, "
            f"{len(self._attribute_errors)} attribute(s) with errors"
        )

    def _add_errors(self, items: Mapping[str, Iterable[str]]) -> None:
        for attribute, errors in items.items():
            for error in errors:
                self.add_error(attribute, error)

    # ------------------------------------------------------------------
    # Attribute access
    # ------------------------------------------------------------------

    def _get_nested_attribute(self, attribute: str) -> Tuple[str, Optional[str]]:
        """
        Split a dotted path into its direct attribute and the nested remainder.

        Only the first separator is consumed; the remainder is resolved by the
        nested form itself.

        Raises:
            ConfigurationError: If the direct attribute is unknown or is not
                a nested form model
        """
        if NESTED_SEPARATOR not in attribute:
            return attribute, None

        attribute, nested = attribute.split(NESTED_SEPARATOR, 1)

        declared = self._attributes.get(attribute)
        if attribute not in self._attributes or not is_nested_model_type(declared, FormModel):
            raise ConfigurationError(
                f'Nested attribute "{attribute}" of "{type(self).__name__}" '
                f"can only be of {FormModel.__name__} type."
            )

        return attribute, nested

    def _read_property(self, attribute: str) -> Any:
        attribute, nested = self._get_nested_attribute(attribute)

        if attribute not in self._attributes:
            raise AccessError(f'Undefined attribute: "{type(self).__name__}.{attribute}".')

        if nested is None:
            return getattr(self, attribute)
        return self._read_nested_model(attribute).get_attribute_value(nested)

    def _write_property(self, attribute: str, value: Any) -> None:
        attribute, nested = self._get_nested_attribute(attribute)
        if nested is None:
            setattr(self, attribute, value)
        else:
            self._read_nested_model(attribute).set_attribute(nested, value)

    def _read_nested_model(self, attribute: str) -> "FormModel":
        model = getattr(self, attribute)
        if not isinstance(model, FormModel):
            raise AccessError(
                f'Nested attribute "{type(self).__name__}.{attribute}" is not set.'
            )
        return model
