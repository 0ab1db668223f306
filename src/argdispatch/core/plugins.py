import importlib
import pkgutil

import click

from .errors import RegistrationError


def load_plugins(package: str) -> None:
    """Import every command module in ``package`` so its ``@command`` declarations register.

    A module that fails to import, or whose commands clash with ones already
    registered, is skipped with a warning on stderr; the rest still load.
    """

    pkg = importlib.import_module(package)
    for m in sorted(pkgutil.iter_modules(pkg.__path__, prefix=f"{package}."), key=lambda x: x.name):
        if m.ispkg:
            continue
        try:
            importlib.import_module(m.name)
        except RegistrationError as e:
            click.echo(f"Warning: commands in {m.name} not registered ({e.code.name}: {e})", err=True)
        except Exception as e:
            click.echo(f"Warning: command module import failed: {m.name} ({e!r})", err=True)
