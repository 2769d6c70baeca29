"""Manual run: load the bundled contacts.csv and print summary counts."""

import logging
from importlib import resources

from .loader import load_from_csv
from .queries import unique_cities
from .rules import BUNDLED_RESOURCE


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    with resources.files("addressbook").joinpath("data").joinpath(BUNDLED_RESOURCE).open("rb") as f:
        contacts = load_from_csv(f)

    print(f"Loaded contacts: {len(contacts)}")
    print(f"Cities: {unique_cities(contacts)}")


if __name__ == "__main__":
    main()
