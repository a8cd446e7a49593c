"""Utility helpers shared across Streamlit app modules."""

from utils.io import comparison_to_dict, comparison_to_json, dataframe_to_csv_bytes

__all__ = [
    "comparison_to_dict",
    "comparison_to_json",
    "dataframe_to_csv_bytes",
]
