"""Chart rendering parameters

Defines the data model produced by the config resolver. Instances are
immutable and built fresh for every request.
"""

from itertools import cycle, islice
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

CHART_TYPES = ["line", "bar", "scatter", "pie"]

ChartType = Literal["line", "bar", "scatter", "pie"]

# Integral values stay ints so they serialize as 10 rather than 10.0
Number = Union[int, Annotated[float, Field(allow_inf_nan=False)]]


class ChartConfig(BaseModel):
    """Validated, defaulted configuration for one chart"""

    model_config = ConfigDict(frozen=True)

    type: ChartType = "bar"
    title: str = Field(default="My Chart", max_length=50)
    width: int = Field(default=800, ge=1, le=2000)
    height: int = Field(default=600, ge=1, le=2000)
    bg_color: str = Field(default="#ffffff", pattern=r"^#[0-9A-Fa-f]{6}$")
    show_grid: bool = True
    xlabel: str = Field(default="X Axis", max_length=30)
    ylabel: str = Field(default="Y Axis", max_length=30)


class SeriesData(BaseModel):
    """Parallel values/labels/colors sequences, aligned by position.

    labels and colors are kept at their parsed length; the visible_* helpers
    align them to the number of values.
    """

    model_config = ConfigDict(frozen=True)

    values: List[Number] = Field(min_length=1)
    labels: List[str]
    colors: List[str]

    def visible_labels(self) -> List[str]:
        """Labels truncated to the number of values"""
        return list(self.labels[: len(self.values)])

    def visible_colors(self) -> List[str]:
        """
        Colors aligned to the number of values

        Longer lists are truncated; shorter lists are repeated cyclically so
        every data point gets an explicit color.
        """
        if not self.colors:
            return []
        return list(islice(cycle(self.colors), len(self.values)))


class ChartParams(BaseModel):
    """Everything needed to build one renderable document"""

    model_config = ConfigDict(frozen=True)

    config: ChartConfig
    series: SeriesData
