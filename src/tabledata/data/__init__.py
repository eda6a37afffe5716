"""
Data Package - Row Storage, Retrieval and Load Pipelines.

    - DataPersistence: live row view plus baseline snapshot
    - DataPipeline: named, deduplicated sequences of async steps
    - DataLoader: soft-failing JSON retrieval over HTTP
"""

from tabledata.data.loader import DataLoader
from tabledata.data.persistence import DataPersistence
from tabledata.data.pipeline import DataPipeline, PipelineStep

__all__ = ["DataLoader", "DataPersistence", "DataPipeline", "PipelineStep"]
