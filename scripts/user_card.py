#!/usr/bin/env python3
"""Build a small user card with Component and BEMX classes.

Prints a complete HTML document:

    python scripts/user_card.py --name Akido --photo /icon.jpeg
"""

from __future__ import annotations

import argparse

from simple_component import bemx
from simple_component.component import Component
from simple_component.page import render_page


def build_user_card(name: str, photo: str, status: str = "Online") -> list[Component]:
    name_label = (
        Component("label")
        .add_content(name)
        .add_class(bemx.generate("label", "user-card", [], ["name"]))
    )
    photo_img = (
        Component("img", False)
        .add_class(bemx.generate("img", "user-card"))
        .set_attribute("src", photo)
        .set_attribute("alt", "user image")
    )
    status_label = (
        Component("label")
        .add_content(status)
        .add_class(bemx.generate("label", "user-card", [], ["status"]))
    )
    return [name_label, photo_img, status_label]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render the user card example.")
    parser.add_argument("--name", default="Akido", help="User name shown on the card")
    parser.add_argument("--photo", default="/icon.jpeg", help="Photo URL")
    parser.add_argument("--status", default="Online", help="Status label")
    args = parser.parse_args(argv)

    print(render_page(build_user_card(args.name, args.photo, args.status), title="User card"))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
