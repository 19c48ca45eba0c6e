"""Type-check the kdtree2d package with mypy.

Usage::

    python tools/run_mypy.py [extra mypy arguments]

Exits with mypy's status code.
"""
import os
import sys
import contextlib
from rich.console import Console
from rich.theme import Theme

PROJECT_MODULE = "kdtree2d"
PROJECT_ROOT_FILES = ['kdtree2d', 'pyproject.toml', 'mypy.ini']

console_theme = Theme({
    "cmd": "italic gray50",
    "error": "bold red",
})

if sys.platform == 'win32':
    class EMOJI:
        cmd = ">"
else:
    class EMOJI:
        cmd = ":computer:"


def emit_cmdstr(console, cmd):
    """Print the mypy invocation, styled as a command, to stdout"""
    console.print(f"{EMOJI.cmd} [cmd] {cmd}")


def find_project_root():
    root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
    missing = [name for name in PROJECT_ROOT_FILES
               if not os.path.exists(os.path.join(root, name))]
    if missing:
        raise RuntimeError(
            f"{root} does not look like the kdtree2d repository root; "
            f"missing {', '.join(missing)}"
        )
    return root


@contextlib.contextmanager
def working_dir(new_dir):
    current_dir = os.getcwd()
    try:
        os.chdir(new_dir)
        yield
    finally:
        os.chdir(current_dir)


def __main__(argv=None):
    try:
        import mypy.api
    except ImportError as e:
        raise RuntimeError(
            "Mypy not found. Please install it by running "
            "pip install -e .[dev] from the repo root"
        ) from e

    console = Console(theme=console_theme)
    root = find_project_root()
    config = os.path.join(root, "mypy.ini")
    args = ["--config-file", config, PROJECT_MODULE]
    args += list(sys.argv[1:] if argv is None else argv)

    with working_dir(root):
        # mypy won't color its output when not attached to a tty
        os.environ['MYPY_FORCE_COLOR'] = '1'
        emit_cmdstr(console, f"mypy.api.run {' '.join(args)}")
        report, errors, status = mypy.api.run(args)

    print(report, end='')
    if errors:
        console.print("[error]mypy reported errors:[/error]")
        print(errors, end='', file=sys.stderr)
    return status


if __name__ == "__main__":
    sys.exit(__main__())
