"""Interactive terminal shell over a trie."""

from __future__ import annotations

from typing import Callable, Iterable

from prefixtrie.trie import Trie

USAGE = """Commands:
  add KEY [PAYLOAD]     -- store a key       (e.g. add tea hot)
  update KEY [PAYLOAD]  -- replace a payload (e.g. update tea iced)
  get KEY               -- print the payload
  has KEY               -- is KEY stored?
  find PREFIX           -- keys starting with PREFIX
  remove KEY            -- forget a key
  list                  -- every stored key
  size                  -- number of stored keys
  clear                 -- empty the trie
  quit                  -- leave the shell"""

_ARGS = {
    "add": "KEY [PAYLOAD]",
    "update": "KEY [PAYLOAD]",
    "get": "KEY",
    "has": "KEY",
    "find": "PREFIX",
    "remove": "KEY",
}


def _prompt_lines(prompt: str = "  trie> ") -> Iterable[str]:
    while True:
        try:
            yield input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return


def execute(trie: Trie, inp: str) -> str | None:
    """Run one shell command; returns the text to show, or None to stop."""
    parts = inp.strip().split(maxsplit=2)
    if not parts:
        return ""
    cmd = parts[0].lower()

    if cmd in ("quit", "exit", "done"):
        return None
    if cmd == "help":
        return USAGE
    if cmd in _ARGS and len(parts) < 2:
        return f"  Usage: {cmd} {_ARGS[cmd]}"

    if cmd in ("add", "update"):
        key = parts[1]
        payload = parts[2] if len(parts) > 2 else None
        ok = trie.add(key, payload) if cmd == "add" else trie.update(key, payload)
        return f"  {ok}"
    if cmd == "get":
        return f"  {trie.get(parts[1])!r}"
    if cmd == "has":
        return f"  {trie.contains(parts[1])}"
    if cmd == "remove":
        return f"  {trie.remove(parts[1])}"
    if cmd == "find":
        found = sorted(trie.keys(parts[1]), key=str)
        if not found:
            return "  (no match)"
        return "\n".join(f"  {k}" for k in found)
    if cmd == "list":
        if trie.is_empty:
            return "  (empty)"
        return "\n".join(f"  {k}" for k in sorted(trie.to_array(), key=str))
    if cmd == "size":
        return f"  {trie.size}"
    if cmd == "clear":
        trie.clear()
        return "  Trie cleared."
    return "  Unknown command.  Type 'help' for the list."


def run_shell(
    trie: Trie,
    lines: Iterable[str] | None = None,
    out: Callable[[str], None] = print,
) -> Trie:
    """Read commands from ``lines`` (default: the terminal) until quit."""
    if lines is None:
        out("\n" + "=" * 60)
        out("  PREFIXTRIE -- Interactive Shell")
        out("=" * 60)
        out(USAGE)
        out("")
        lines = _prompt_lines()

    for inp in lines:
        result = execute(trie, inp)
        if result is None:
            break
        if result:
            out(result)
    return trie
