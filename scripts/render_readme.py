from __future__ import annotations

import argparse
import sys
import textwrap
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

# template placeholder -> (example file, marker name)
SNIPPETS = {
    "{{ QUICKSTART }}": ("quickstart.py", "README_QUICKSTART"),
    "{{ TASKS }}": ("tasks_and_channels.py", "README_TASKS"),
}


def extract_block(path: Path, start_marker: str, end_marker: str) -> str:
    text = path.read_text(encoding="utf-8")

    start = text.find(start_marker)
    end = text.find(end_marker)
    if start == -1 or end == -1 or end <= start:
        raise ValueError(
            f"Could not find markers in {path}: {start_marker} / {end_marker}"
        )

    block = text[start + len(start_marker) : end]
    # snippets live inside main(); dedent them
    return textwrap.dedent(block.strip("\n")).strip("\n")


def render(template_path: Path, out_path: Path, *, check: bool) -> int:
    rendered = template_path.read_text(encoding="utf-8")
    for placeholder, (fname, marker) in SNIPPETS.items():
        block = extract_block(
            ROOT / "examples" / fname,
            start_marker=f"# [START {marker}]",
            end_marker=f"# [END {marker}]",
        )
        rendered = rendered.replace(placeholder, block)

    if check:
        current = out_path.read_text(encoding="utf-8") if out_path.exists() else ""
        if current != rendered:
            sys.stderr.write(
                "README.md is out of date. Run: python scripts/render_readme.py\n"
            )
            return 1
        return 0

    out_path.write_text(rendered, encoding="utf-8")
    return 0


def main() -> int:
    p = argparse.ArgumentParser(
        description="Render README.md from template + examples snippets."
    )
    p.add_argument(
        "--check", action="store_true", help="Fail if README.md is not up to date."
    )
    args = p.parse_args()

    return render(
        template_path=ROOT / "README.template.md",
        out_path=ROOT / "README.md",
        check=args.check,
    )


if __name__ == "__main__":
    raise SystemExit(main())
