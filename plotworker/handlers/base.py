from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from plotworker.chart_params import ChartParams


class ChartHandler(ABC):
    """Base class for chart kind handlers.

    Every kind shares the same dataset shape; subclasses only add styling
    through dataset_options().
    """

    chart_type: str = ""

    def build_dataset(self, params: "ChartParams") -> Dict[str, Any]:
        """Build the single dataset entry of the chart description"""
        colors = params.series.visible_colors()
        dataset: Dict[str, Any] = {
            "label": params.config.title,
            "data": list(params.series.values),
            "backgroundColor": colors,
            "borderColor": colors,
            "borderWidth": 1,
        }
        dataset.update(self.dataset_options())
        return dataset

    @abstractmethod
    def dataset_options(self) -> Dict[str, Any]:
        """Kind-specific dataset styling"""
        pass
