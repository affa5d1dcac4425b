from __future__ import annotations

import inspect
from dataclasses import dataclass
from inspect import Parameter
from typing import Any, get_type_hints

from classwire.exceptions import ClasswireDependencyInferenceError

_MISSING_ANNOTATION: Any = object()


@dataclass(frozen=True, slots=True)
class ConstructorDependency:
    """Represent a dependency key bound to a constructor parameter."""

    provides: Any
    parameter: Parameter
    position: int
    """Index of the parameter in the constructor signature, ``self`` excluded."""

    @property
    def is_required(self) -> bool:
        return self.parameter.default is Parameter.empty


@dataclass(slots=True)
class ConstructorDependenciesExtractor:
    """Extracts injectable parameters from a concrete type's ``__init__``."""

    def extract(self, concrete_type: type[Any]) -> list[ConstructorDependency]:
        """Return the annotated constructor parameters of ``concrete_type``.

        Variadic parameters are ignored. Optional parameters without a usable
        annotation are skipped so their default applies.

        Raises:
            ClasswireDependencyInferenceError: A required parameter has no
                resolvable annotation.

        """
        parameters = self._constructor_parameters(concrete_type)
        annotations, annotation_error = self._resolved_type_hints(concrete_type)
        dependencies: list[ConstructorDependency] = []

        for position, parameter in enumerate(parameters):
            provides = self._resolve_parameter_annotation(
                parameter=parameter,
                annotations=annotations,
                annotation_error=annotation_error,
                provider_name=concrete_type.__qualname__,
            )
            if provides is _MISSING_ANNOTATION:
                continue
            dependencies.append(
                ConstructorDependency(provides=provides, parameter=parameter, position=position),
            )

        return dependencies

    def _constructor_parameters(self, concrete_type: type[Any]) -> tuple[Parameter, ...]:
        try:
            signature = inspect.signature(concrete_type)
        except (TypeError, ValueError):
            # builtins without introspectable signatures take no injected arguments
            return ()
        return tuple(
            parameter
            for parameter in signature.parameters.values()
            if parameter.kind not in (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)
        )

    def _resolved_type_hints(
        self,
        concrete_type: type[Any],
    ) -> tuple[dict[str, Any], Exception | None]:
        annotations: dict[str, Any] = {}
        annotation_error: Exception | None = None

        # class-level hints cover dataclass fields whose generated __init__
        # carries unresolved string annotations
        for source in (concrete_type.__init__, concrete_type):
            try:
                source_annotations = get_type_hints(source)
            except (AttributeError, NameError, TypeError) as error:
                if annotation_error is None:
                    annotation_error = error
                continue
            for name, annotation in source_annotations.items():
                annotations.setdefault(name, annotation)

        return annotations, annotation_error

    def _resolve_parameter_annotation(
        self,
        *,
        parameter: Parameter,
        annotations: dict[str, Any],
        annotation_error: Exception | None,
        provider_name: str,
    ) -> Any:
        annotation = annotations.get(parameter.name, _MISSING_ANNOTATION)
        if annotation is not _MISSING_ANNOTATION:
            return annotation

        raw_annotation = parameter.annotation
        if raw_annotation is not Parameter.empty and not isinstance(raw_annotation, str):
            return raw_annotation

        if parameter.default is not Parameter.empty:
            return _MISSING_ANNOTATION

        error_message = (
            f"Unable to infer dependency for required parameter '{parameter.name}' "
            f"of '{provider_name}'. Add a type annotation or a default value."
        )
        if annotation_error is None:
            raise ClasswireDependencyInferenceError(error_message)
        msg = f"{error_message} Original annotation error: {annotation_error}"
        raise ClasswireDependencyInferenceError(msg) from annotation_error


__all__ = ["ConstructorDependenciesExtractor", "ConstructorDependency"]
