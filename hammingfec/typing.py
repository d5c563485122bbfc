from __future__ import annotations

from typing import TypeAlias

import numpy as np
import numpy.typing as npt

BitArray: TypeAlias = npt.NDArray[np.uint8]
