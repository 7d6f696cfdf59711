"""Artifact export package."""

from synthdata.artifacts.exporter import YamlExporter

__all__ = ["YamlExporter"]
