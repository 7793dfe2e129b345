import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional

import pandas as pd

from .point import Point

logger = logging.getLogger(__name__)


class TrajectoryStream:
    """
    Reads a flat CSV table of fixes and yields them as points, one at a time.
    Elevation and timestamp columns are optional, as are individual cells.
    """
    def __init__(
        self,
        filepath: str | Path,
        sep: str = ',',
        col_mapping: Optional[Dict[str, str]] = None,
        chunksize: int = 1000
    ):
        self.filepath = Path(filepath)
        self.sep = sep
        self.chunksize = chunksize

        self.mapping = col_mapping or {
            'lat': 'lat',
            'lon': 'lon',
            'elevation': 'elevation',
            'timestamp': 'timestamp'
        }

    def stream(self) -> Iterator[Point]:
        """
        Yields points from the file in row order.
        """
        header = pd.read_csv(self.filepath, nrows=0, sep=self.sep)
        missing = [self.mapping[c] for c in ('lat', 'lon') if self.mapping.get(c) not in header.columns]
        if missing:
            raise ValueError(f"CSV must contain columns {missing}. Found: {list(header.columns)}")

        ele_col = self.mapping.get('elevation')
        ts_col = self.mapping.get('timestamp')
        has_ele_col = ele_col in header.columns
        has_ts_col = ts_col in header.columns

        count = 0
        with pd.read_csv(self.filepath, chunksize=self.chunksize, sep=self.sep) as reader:
            for chunk in reader:
                if has_ts_col:
                    chunk[ts_col] = pd.to_datetime(chunk[ts_col], utc=True)

                for _, row in chunk.iterrows():
                    elevation = None
                    if has_ele_col and not pd.isna(row[ele_col]):
                        elevation = float(row[ele_col])
                    timestamp = None
                    if has_ts_col and not pd.isna(row[ts_col]):
                        timestamp = row[ts_col].to_pydatetime()

                    count += 1
                    yield Point(
                        lat=float(row[self.mapping['lat']]),
                        lon=float(row[self.mapping['lon']]),
                        elevation=elevation,
                        timestamp=timestamp
                    )

        logger.debug("read %d points from %s", count, self.filepath)

    def read(self) -> List[Point]:
        return list(self.stream())
