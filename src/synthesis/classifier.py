"""Region classification of visual kinds."""

from .models import Bucket, Placement

FULL_BLEED_KINDS = frozenset({"header", "navbar", "hero", "footer"})

_FULL_BLEED_BUCKETS = {
    "header": Bucket.HEADER,
    "navbar": Bucket.HEADER,
    "hero": Bucket.HERO,
    "footer": Bucket.FOOTER,
}


def classify(visual_kind: str) -> Placement:
    """Full-bleed for page chrome kinds, grid-packed for everything else."""
    if visual_kind in FULL_BLEED_KINDS:
        return Placement.FULL_BLEED
    return Placement.GRID_PACKED


def bucket_for(visual_kind: str) -> Bucket:
    """Bucket an element of this kind is placed in."""
    return _FULL_BLEED_BUCKETS.get(visual_kind, Bucket.MAIN)
