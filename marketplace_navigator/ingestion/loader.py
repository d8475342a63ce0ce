"""
Snapshot Loader

Reads the marketplace snapshot (JSON) and the schema diagram source (text)
from disk. This is the only asynchronous step: navigation starts once
`SnapshotLoader.load()` has returned.
"""

import asyncio
import hashlib
import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

import structlog
from pydantic import BaseModel

from marketplace_navigator.config import Settings, get_settings
from marketplace_navigator.snapshot import Snapshot

logger = structlog.get_logger(__name__)


class SnapshotLoadError(Exception):
    """Snapshot file is missing or malformed"""


class LoadResult(BaseModel):
    """Audit record of a snapshot load"""
    snapshot_path: str
    diagram_path: Optional[str] = None
    tables_loaded: int = 0
    records_loaded: int = 0
    diagram_loaded: bool = False
    file_hash: Optional[str] = None
    load_duration_seconds: float = 0
    started_at: datetime
    completed_at: Optional[datetime] = None


@dataclass(frozen=True)
class NavigationSession:
    """Everything a navigation session reads from"""
    snapshot: Snapshot
    diagram_source: Optional[str]
    result: LoadResult


def compute_file_hash(file_path: Path) -> str:
    """MD5 of a file, read in chunks"""
    hash_md5 = hashlib.md5()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(4096), b""):
            hash_md5.update(chunk)
    return hash_md5.hexdigest()


def load_snapshot_file(path: Union[str, Path], encoding: str = "utf-8") -> Snapshot:
    """
    Parse a snapshot JSON file.
    
    Raises:
        SnapshotLoadError: File missing, invalid JSON, not an object,
            or a record that does not fit its table's model
    """
    file_path = Path(path)
    if not file_path.exists():
        raise SnapshotLoadError(f"Snapshot file not found: {file_path}")
    
    try:
        raw = json.loads(file_path.read_text(encoding=encoding))
    except UnicodeDecodeError as e:
        raise SnapshotLoadError(f"Cannot decode {file_path} as {encoding}: {e}") from e
    except json.JSONDecodeError as e:
        raise SnapshotLoadError(f"Invalid JSON in {file_path}: {e}") from e
    
    if not isinstance(raw, dict):
        raise SnapshotLoadError(
            f"Snapshot must be an object of tables, got {type(raw).__name__}"
        )
    
    try:
        return Snapshot.from_raw(raw)
    except ValueError as e:
        raise SnapshotLoadError(f"Invalid snapshot data in {file_path}: {e}") from e


def load_diagram_file(path: Union[str, Path], encoding: str = "utf-8") -> Optional[str]:
    """Diagram source text, None when the file does not exist"""
    file_path = Path(path)
    if not file_path.exists():
        logger.warning("Diagram source not found", path=str(file_path))
        return None
    return file_path.read_text(encoding=encoding)


class SnapshotLoader:
    """
    Loads a navigation session from the configured files.
    
    Example:
        loader = SnapshotLoader()
        session = await loader.load()
        navigator = RelationalNavigator(session.snapshot)
    """
    
    def __init__(
        self,
        snapshot_path: Optional[Union[str, Path]] = None,
        diagram_path: Optional[Union[str, Path]] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.snapshot_path = Path(snapshot_path or settings.navigator.snapshot_path)
        self.diagram_path = Path(diagram_path or settings.navigator.diagram_path)
        self.encoding = settings.navigator.encoding
    
    def load_sync(self) -> NavigationSession:
        """Load snapshot and diagram on the calling thread"""
        started_at = datetime.now(timezone.utc)
        
        logger.info(
            "Starting snapshot load",
            snapshot=str(self.snapshot_path),
            diagram=str(self.diagram_path),
        )
        
        snapshot = load_snapshot_file(self.snapshot_path, encoding=self.encoding)
        diagram_source = load_diagram_file(self.diagram_path, encoding=self.encoding)
        
        completed_at = datetime.now(timezone.utc)
        result = LoadResult(
            snapshot_path=str(self.snapshot_path),
            diagram_path=str(self.diagram_path),
            tables_loaded=len(snapshot),
            records_loaded=snapshot.record_count,
            diagram_loaded=diagram_source is not None,
            file_hash=compute_file_hash(self.snapshot_path),
            load_duration_seconds=(completed_at - started_at).total_seconds(),
            started_at=started_at,
            completed_at=completed_at,
        )
        
        logger.info(
            "Snapshot load completed",
            tables=result.tables_loaded,
            records=result.records_loaded,
            diagram_loaded=result.diagram_loaded,
            duration_seconds=round(result.load_duration_seconds, 3),
        )
        
        return NavigationSession(snapshot=snapshot, diagram_source=diagram_source, result=result)
    
    async def load(self) -> NavigationSession:
        """Load snapshot and diagram without blocking the event loop"""
        return await asyncio.to_thread(self.load_sync)
