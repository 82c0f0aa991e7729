"""Serialization module — export results for report and chart front-ends."""

from lactate_engine.serialization.json_export import to_json_string, to_result_dict

__all__ = ["to_json_string", "to_result_dict"]
