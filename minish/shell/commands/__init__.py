"""Import builtin modules for their registration side-effects."""

# Import order fixes the builtin table order: exit, env, setenv, unsetenv, cd, alias, help.
from . import control as _control  # noqa: F401
from . import environment as _environment  # noqa: F401
from . import navigation as _navigation  # noqa: F401
from . import aliases as _aliases  # noqa: F401
from . import meta as _meta  # noqa: F401

__all__ = []
