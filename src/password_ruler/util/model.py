import pydantic
import pydantic_core

__all__ = ("convert_errors",)

CUSTOM_TYPES = {
    "dict_type": "mapping_type",
    "model_type": "mapping_type",
    "model_attributes_type": "mapping_type",
    "typed_dict_type": "mapping_type",
    "list_type": "sequence_type",
    "tuple_type": "sequence_type",
    "literal_error": "enum_value_out_of_range",
    "extra_forbidden": "extra_field",
    "unexpected_keyword_argument": "extra_field",
}
CUSTOM_MESSAGES = {
    # https://docs.pydantic.dev/latest/errors/validation_errors/
    "extra_field": "Extra fields not allowed",
    "missing": "Field is required",
    "enum_value_out_of_range": "Input must be one of: {expected}",
    "mapping_type": "Input must be a valid mapping",
    "sequence_type": "Input must be a valid sequence",
    "greater_than_equal": "Input must be greater than or equal to {ge}",
}


def convert_errors(
    ex: pydantic.ValidationError,
    custom_messages: dict[str, str] = CUSTOM_MESSAGES,
    custom_types: dict[str, str] = CUSTOM_TYPES,
) -> list[pydantic_core.ErrorDetails]:
    """
    Rewrites pydantic errors into shorter, user-facing ones.

    The error context is used to render the message, then dropped. It may hold the
    rejected input, which is not meant to be shown again.
    """
    new_errors: list[pydantic_core.ErrorDetails] = []

    for error in ex.errors(include_url=False):
        ctx = error.get("ctx")

        if custom_type := custom_types.get(error["type"]):
            error["type"] = custom_type

        if custom_message := custom_messages.get(error["type"]):
            error["msg"] = custom_message.format(**ctx) if ctx else custom_message

        if ctx:
            del error["ctx"]
        # never echo rejected input back
        error.pop("input", None)  # type: ignore[misc]

        new_errors.append(error)

    return new_errors
