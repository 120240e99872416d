from .waveform_plot import WaveformPlot

__all__ = ["WaveformPlot"]
