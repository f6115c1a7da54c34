"""Validate data.json against the catalog schema."""

import json
import sys

from jsonschema import ValidationError, validate

from warinc_pages.context import KEYED_CATEGORIES
from warinc_pages.models import Catalog
from warinc_pages.selector import duplicate_ids

SCHEMA = Catalog.model_json_schema()


def main(path: str = "data.json") -> None:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        validate(instance=data, schema=SCHEMA)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        print(f"✗ {path} cannot be read:", e)
        sys.exit(1)
    except ValidationError as e:
        print(f"✗ {path} failed schema validation:")
        print("  →", e.message)
        sys.exit(1)

    catalog = Catalog.model_validate(data)
    for category in sorted(KEYED_CATEGORIES):
        for item_id in duplicate_ids(catalog.get(category) or []):
            print(f"! duplicate {category} id: {item_id} (only the first is reachable)")
    print(f"✓ {path} is valid.")


if __name__ == "__main__":
    main(*sys.argv[1:2])
