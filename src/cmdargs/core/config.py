from attrs import field, frozen

DEFAULT_OPTION_PREFIX = "-"


def _validate_prefix(instance, attribute, value):
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(
            f"{attribute.name} must be a single character, got {value!r}"
        )


@frozen
class ClassifierConfig:
    """Settings for an `ArgumentClassifier`.

    Params:
        option_prefix: Character marking an option token. Any run of it at the
            start of a token is stripped to form the option name.
    """

    option_prefix: str = field(default=DEFAULT_OPTION_PREFIX, validator=_validate_prefix)
