from __future__ import annotations

import sys
from pathlib import Path

from errortools import ReportConfig, main_entry, path_context, wrap_path_call


def load_settings(path: Path) -> dict[str, str]:
    text = wrap_path_call(path, Path.read_text).unwrap()
    settings: dict[str, str] = {}
    with path_context(path):
        for number, line in enumerate(text.splitlines(), start=1):
            if not line.strip() or line.startswith("#"):
                continue
            if "=" not in line:
                raise ValueError(f"line {number}: expected key=value")
            key, value = line.split("=", 1)
            settings[key.strip()] = value.strip()
    return settings


@main_entry(config=ReportConfig(exit_code=2))
def main(argv: list[str]) -> None:
    for name in argv or ["settings.conf"]:
        settings = load_settings(Path(name))
        print(f"{name}: {len(settings)} settings")


if __name__ == "__main__":
    main(sys.argv[1:])
