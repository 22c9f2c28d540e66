"""Fetch pipeline stage."""

from pathlib import Path

from reelai_core.pipeline.base import Invocation, PipelineStage
from reelai_core.processors.fetcher import MediaFetcher


class FetchStage(PipelineStage):
    """
    Download the uploaded video to scratch storage.

    Input: invocation.event
    Output: invocation.media_path, removed when the invocation's
    resources close
    """

    name = "fetch"

    def __init__(self, fetcher: MediaFetcher):
        self.fetcher = fetcher

    def execute(self, invocation: Invocation) -> Path:
        event = invocation.event
        invocation.media_path = invocation.resources.enter_context(
            self.fetcher.scratch_copy(event.bucket, event.name, invocation.video_id)
        )
        return invocation.media_path
