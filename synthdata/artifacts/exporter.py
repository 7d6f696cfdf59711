"""YAML export for training-data artifacts.

Per-artifact export produces one payload per file with the raw content:
no transformation, no YAML validation. Bulk export is an ordered list of
independent payloads; bundle() packs such a list into a zip archive for
shells that can only deliver a single download.
"""

import io
import zipfile
from collections.abc import Iterable

from synthdata.schemas.artifacts import Artifact, ExportPayload


class YamlExporter:
    """Build download payloads for artifacts."""

    MIME_TYPE = "text/yaml"
    EXTENSION = ".yaml"
    BUNDLE_MIME_TYPE = "application/zip"

    def export(self, artifact: Artifact) -> ExportPayload:
        """Export a single artifact as `<name>.yaml`."""
        return ExportPayload(
            filename=f"{artifact.name}{self.EXTENSION}",
            mime_type=self.MIME_TYPE,
            data=artifact.content.encode("utf-8"),
        )

    def export_all(self, artifacts: Iterable[Artifact]) -> list[ExportPayload]:
        """Export every artifact, preserving order."""
        return [self.export(artifact) for artifact in artifacts]

    def bundle(self, payloads: Iterable[ExportPayload]) -> bytes:
        """Pack payloads into a zip archive.

        Artifact names are not unique after deletions, so repeated filenames
        get a numeric suffix: `Training Data 2 (2).yaml`.

        Returns:
            Zip archive bytes (a valid empty archive when there are no payloads)
        """
        buffer = io.BytesIO()
        seen: dict[str, int] = {}

        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for payload in payloads:
                archive.writestr(self._unique_name(payload.filename, seen), payload.data)

        return buffer.getvalue()

    @staticmethod
    def _unique_name(filename: str, seen: dict[str, int]) -> str:
        count = seen.get(filename, 0) + 1
        seen[filename] = count
        if count == 1:
            return filename

        stem, dot, suffix = filename.rpartition(".")
        if not dot:
            return f"{filename} ({count})"
        return f"{stem} ({count}).{suffix}"
