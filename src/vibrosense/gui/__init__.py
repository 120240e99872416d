"""Desktop GUI implementation built with PySide6/Qt.

Screens in :mod:`gui.screens` render one navigation state each, while
:mod:`gui.widgets` houses the shared pyqtgraph waveform plot. This layer owns
the Qt event loop and delegates all behaviour to :class:`vibrosense.session.AppSession`.
"""
