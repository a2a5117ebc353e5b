"""CLI Utility Functions"""

import os
import shlex
import subprocess
import sys
import tempfile

API_KEY_PREFIX = "sk-"


def validate_api_key(value: str) -> str | None:
    """Return why ``value`` is not an acceptable OpenAI key, or None."""
    if not value or not value.strip():
        return "API key is required"
    if not value.strip().startswith(API_KEY_PREFIX):
        return f'API key must start with "{API_KEY_PREFIX}"'
    return None


def _editor() -> str:
    editor = os.environ.get('VISUAL') or os.environ.get('EDITOR')
    if editor:
        return editor
    return 'notepad' if sys.platform == 'win32' else 'vi'


def edit_message(message: str) -> str | None:
    """Open message in the user's editor. Returns edited text or None on failure."""
    tmp = tempfile.NamedTemporaryFile(mode='w', suffix='.gitcommit', delete=False, encoding='utf-8')
    try:
        tmp.write(message)
        tmp.close()
        subprocess.run([*shlex.split(_editor()), tmp.name], check=True)
        with open(tmp.name, 'r', encoding='utf-8') as f:
            edited = f.read().strip()
        return edited if edited else None
    except (subprocess.CalledProcessError, OSError):
        return None
    finally:
        try:
            os.unlink(tmp.name)
        except OSError as e:
            print(f"Warning: Could not delete temp file {tmp.name}: {e}", file=sys.stderr)
