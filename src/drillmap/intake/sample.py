"""Fixed sample dataset emitted in place of real file parsing."""

from .models import DrillingData

SAMPLE_HEADERS = ["DEPTH", "GAMMA_RAY", "RESISTIVITY", "POROSITY", "TIMESTAMP"]
SAMPLE_UNITS = ["ft", "API", "ohm.m", "fraction", "datetime"]
SAMPLE_ROWS = [
    {"DEPTH": 1000, "GAMMA_RAY": 45.2, "RESISTIVITY": 120.5, "POROSITY": 0.15, "TIMESTAMP": "01/01/2024 10:00:00"},
    {"DEPTH": 1001, "GAMMA_RAY": 47.1, "RESISTIVITY": 118.3, "POROSITY": 0.16, "TIMESTAMP": "01/01/2024 10:01:00"},
    {"DEPTH": 1002, "GAMMA_RAY": 43.8, "RESISTIVITY": 125.7, "POROSITY": 0.14, "TIMESTAMP": "01/01/2024 10:02:00"},
]


def sample_dataset(filename: str) -> DrillingData:
    """Build the sample dataset for an uploaded file name. File content is never read."""
    return DrillingData(
        filename=filename,
        headers=list(SAMPLE_HEADERS),
        data=[dict(row) for row in SAMPLE_ROWS],
        units=list(SAMPLE_UNITS),
    )
