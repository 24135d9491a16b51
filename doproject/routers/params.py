from typing import Annotated

from fastapi import Path

# ids outside the signed 64-bit range would overflow the driver
RowId = Annotated[int, Path(ge=1, le=2**63 - 1)]
