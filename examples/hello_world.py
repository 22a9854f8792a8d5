"""
path_store — Hello World

Values live under colon paths. Every top-level key carries a policy,
either an explicit override or the store's default.
"""

import logging

from path_store import AccessDeniedError, NotFoundError, PathStore

# ─── A store with declared overrides ───


class AppState(PathStore):
    declared_restrictions = {
        "secrets": "none",
        "settings": "read",
        "audit": "write",
        "session": "read-write",
    }


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s")

    # ──────────────────────────────────────
    #  1. Create the store and seed it
    # ──────────────────────────────────────
    state = AppState(
        fields={
            "secrets": {"api_key": "sk-123"},
            "settings": {"theme": "dark"},
            "audit": [],
            "session": {},
            "clock": lambda: {"ticks": 42},
        }
    )

    # ──────────────────────────────────────
    #  2. Read and write through paths
    # ──────────────────────────────────────
    state.write("session:user:id", "alice@acme.com")
    print("session user:", state.read("session:user:id"))
    print("theme:       ", state.read("settings:theme"))
    print("ticks (lazy):", state.read("clock:ticks"))

    state.write("audit:0", "alice logged in")

    # ──────────────────────────────────────
    #  3. Denials and missing values
    # ──────────────────────────────────────
    for path in ("secrets:api_key", "audit"):
        try:
            state.read(path)
        except AccessDeniedError as exc:
            print(f"  [DENIED] {exc}")

    try:
        state.write("settings:theme", "light")
    except AccessDeniedError as exc:
        print(f"  [DENIED] {exc}")

    try:
        state.read("session:cart")
    except NotFoundError as exc:
        print(f"  [MISSING] {exc}")

    # ──────────────────────────────────────
    #  4. Snapshot of readable overrides
    # ──────────────────────────────────────
    print("entries:", state.entries())


if __name__ == "__main__":
    main()
