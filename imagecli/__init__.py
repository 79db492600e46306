"""imagecli: pairwise perceptual similarity for image job tables.

Reads a space-delimited table of image path pairs and appends a similarity
score and the time taken to each row.
  - decoder: extension dispatch and canonical RGB decoding
  - hashing: average and difference fingerprints
  - scorer: max-of-two-distances comparison
  - batch: row loop, optionally across worker processes
"""

from .config import VERSION

__version__ = VERSION
