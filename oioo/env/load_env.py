import os
from pydantic import BaseModel, ValidationError
from typing import Callable, Dict, TypeVar, Union

from dotenv import dotenv_values

from oioo.errors import InvalidConfiguration

from .env import Env

T = TypeVar("T", bound=BaseModel)

PrimaryType = Union[str, int, bool, float, bytes]


def _coerce(
    envar_name: str,
    envar_value: str,
    envar_type: Callable[[str], PrimaryType],
) -> PrimaryType:
    try:
        return envar_type(envar_value)

    except ValueError as err:
        raise InvalidConfiguration(
            f"Could not parse {envar_name}",
            cause=err,
            field=envar_name,
            value=envar_value,
        )


def load_env(default: type[Env], env_file: str = None, override: T | None = None) -> T:
    """
    Build an Env from process environment variables, then an optional
    dotenv file, then an explicit override model, each layer winning over
    the last. Variables not named by ``types_map()`` are ignored.
    """
    envars = default.types_map()

    if env_file is None:
        env_file = ".env"

    values: Dict[str, PrimaryType] = {}
    for envar_name, envar_type in envars.items():
        envar_value = os.getenv(envar_name)
        if envar_value:
            values[envar_name] = _coerce(envar_name, envar_value, envar_type)

    if env_file and os.path.exists(env_file):
        for envar_name, envar_value in dotenv_values(dotenv_path=env_file).items():
            envar_type = envars.get(envar_name)
            if envar_type and envar_value:
                values[envar_name] = _coerce(envar_name, envar_value, envar_type)

    model = default
    if override:
        values.update(**override.model_dump(exclude_none=True))
        model = type(override)

    try:
        return model(
            **{name: value for name, value in values.items() if value is not None}
        )

    except ValidationError as err:
        raise InvalidConfiguration(
            f"Invalid {model.__name__} settings",
            cause=err,
            fields=sorted(values),
        )
