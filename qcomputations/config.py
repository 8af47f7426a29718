"""Process-wide configuration of physical constants, numerics and output."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum
from typing import ClassVar


class MultiplyAlg(IntEnum):
    """Matrix multiplication strategy."""

    COMMON_MODE = 0


class QmeAlgorithm(IntEnum):
    """Integrator used for the quantum master equation."""

    RUNGE_KUTT_4 = 121
    RUNGE_KUTT_2 = 122


@dataclass
class QConfig:
    """Shared settings; obtain the shared object with :meth:`instance`."""

    h: float = 1.0
    w: float = 1.0
    g: float = 0.01
    max_photons: int = 1
    fig_width: int = 19
    fig_height: int = 10
    dpi: int = 80
    multiply_mode: MultiplyAlg = MultiplyAlg.COMMON_MODE
    eps: float = 1e-12
    width: int = 15
    waveguides_length: float = 0.0
    waveguides_amplitude: float = 0.0
    csv_max_number_size: int = 21
    csv_num_accuracy: int = 16
    python_script_path: str = "seaborn_plot.py"
    qme_algorithm: QmeAlgorithm = QmeAlgorithm.RUNGE_KUTT_2
    exp_accuracy: int = 10

    _instance: ClassVar[QConfig | None] = None

    @classmethod
    def instance(cls) -> QConfig:
        """Return the shared configuration object, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def reset(self) -> None:
        """Restore every setting to its default value."""
        for field in fields(self):
            setattr(self, field.name, field.default)

    def show(self) -> None:
        """Print the main settings."""
        mode = "COMMON_MODE" if self.multiply_mode == MultiplyAlg.COMMON_MODE else ""
        lines = [
            "CONFIG PARAMS: ",
            f" h - {self.h:g}",
            f" w - {self.w:g}",
            f" g - {self.g:g}",
            f" eps - {self.eps:g}",
            f" fig_width - {self.fig_width}",
            f" fig_height - {self.fig_height}",
            f" dpi - {self.dpi}",
            f" print width - {self.width}",
            f" MULTIPLY_MODE - {mode}",
        ]
        print("\n".join(lines))