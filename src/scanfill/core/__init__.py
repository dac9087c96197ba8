"""Core scanline fill algorithms for scanfill.

This module contains the pipeline stages:

- Edge building (degenerate edge exclusion)
- Edge table and active edge list maintenance
- Intersection computation and span pairing
- Output modes (points, spans, pixel callback, RGBA image)

Key functions:
- build_edges: Convert a vertex loop into directed edges
- intersect_x: X-coordinate where a scanline crosses an edge
- fill_points / fill_spans / fill_pixels / fill_image: Output modes

Key classes:
- EdgeTable: Pending edges, drained from the tail
- ActiveEdgeList: Edges on the current scanline
- ScanlineFiller: The scanline loop shared by all output modes
"""

from scanfill.core.edge_table import ActiveEdgeList, EdgeTable
from scanfill.core.edges import build_edges
from scanfill.core.emitters import fill_image, fill_pixels, fill_points, fill_spans
from scanfill.core.geometry import intersect_x, signed_area
from scanfill.core.scanline import ScanlineFiller, ScanResult

__all__ = [
    # Edge table classes
    "ActiveEdgeList",
    "EdgeTable",
    # Driver
    "ScanResult",
    "ScanlineFiller",
    # Functions
    "build_edges",
    "fill_image",
    "fill_pixels",
    "fill_points",
    "fill_spans",
    "intersect_x",
    "signed_area",
]
