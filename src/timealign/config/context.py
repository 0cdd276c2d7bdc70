from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from timealign.classification.info import ClassificationInfo, assemble
from timealign.config.request import RequestConfig, load_request
from timealign.domain.source import SampleSet
from timealign.domain.timeline import Timeline
from timealign.domain.window import ReferenceWindow
from timealign.io.readers import read_samples, read_timeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    config: RequestConfig
    timeline: Timeline
    samples: Optional[SampleSet]
    reference: ReferenceWindow


def load_request_context(path: Path | str) -> RequestContext:
    """Load a request YAML and the timeline/samples it points at."""
    cfg = load_request(Path(path))
    return resolve_request(cfg)


def resolve_request(cfg: RequestConfig) -> RequestContext:
    if cfg.timeline_file is not None:
        timeline = read_timeline(cfg.timeline_file)
    else:
        timeline = Timeline(cfg.timeline or [])

    samples = read_samples(cfg.samples_file) if cfg.samples_file is not None else None
    if cfg.reference is not None:
        reference = ReferenceWindow(
            start=cfg.reference.start,
            end=cfg.reference.end,
            num_samples=cfg.reference.num_samples,
        )
    else:
        assert samples is not None
        reference = ReferenceWindow.from_sample(samples.first())
        logger.info(
            "Reference window from first sample: %s..%s (%d samples)",
            reference.start,
            reference.end,
            reference.num_samples,
        )
    return RequestContext(config=cfg, timeline=timeline, samples=samples, reference=reference)


def build_info(ctx: RequestContext) -> ClassificationInfo:
    cfg = ctx.config
    bands = list(cfg.bands)
    labels = list(cfg.labels)
    if ctx.samples is not None:
        bands = bands or list(ctx.samples.bands())
        labels = labels or list(ctx.samples.labels())
    return assemble(
        ctx.timeline,
        bands,
        labels,
        ctx.reference.start,
        ctx.reference.end,
        ctx.reference.num_samples,
    )
