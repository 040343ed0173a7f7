import json
from pathlib import Path

DEFAULT_SEED_FILE = Path(__file__).resolve().parent / "data" / "seed.json"


def load_seed_data(path=DEFAULT_SEED_FILE):
    """Load categories and recipes from a JSON seed file.

    Args:
        path (str or Path): Path to the JSON file.

    Returns:
        dict: ``{"categories": [...], "recipes": [...]}``; both lists are
        empty when the file does not exist.
    """
    p = Path(path)
    if not p.exists():
        return {"categories": [], "recipes": []}
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    return {
        "categories": data.get("categories", []),
        "recipes": data.get("recipes", []),
    }
