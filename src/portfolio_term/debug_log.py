import threading
import time

from portfolio_term.ansi import strip_ansi
from portfolio_term.types import ts_str


class DebugLogger:
    """Manages optional log files for rendered output and diagnostics.

    Errors are also kept in ``errors`` whether or not logging is enabled, so
    they can be reported once the curses screen is gone.
    """

    OUTPUT_LOG = "term_output.log"
    DIAG_LOG = "term_diag.log"

    def __init__(self):
        self.enabled = False
        self.errors: list[str] = []
        self._output_fh = None
        self._diag_fh = None
        # The content loader thread logs while the UI thread may stop()
        self._lock = threading.Lock()

    def start(self):
        with self._lock:
            self._output_fh = open(self.OUTPUT_LOG, "a", encoding="utf-8")
            self._diag_fh = open(self.DIAG_LOG, "a", encoding="utf-8")
            self.enabled = True
            sep = f"\n{'='*60}\n  Session started: {time.strftime('%Y-%m-%d %H:%M:%S')}\n{'='*60}\n"
            for fh in (self._output_fh, self._diag_fh):
                fh.write(sep)
                fh.flush()

    def stop(self):
        with self._lock:
            self.enabled = False
            for fh in (self._output_fh, self._diag_fh):
                if fh:
                    try:
                        fh.close()
                    except OSError:
                        pass
            self._output_fh = self._diag_fh = None

    def log_output(self, line: str):
        with self._lock:
            if not self.enabled or not self._output_fh:
                return
            self._output_fh.write(f"{ts_str(time.time())} | {strip_ansi(line)}\n")
            self._output_fh.flush()

    def log_diag(self, message: str):
        with self._lock:
            if not self.enabled or not self._diag_fh:
                return
            self._diag_fh.write(f"{ts_str(time.time())} | {message}\n")
            self._diag_fh.flush()

    def log_error(self, message: str):
        """Record an error and write it to the diagnostic log if enabled."""
        with self._lock:
            self.errors.append(message)
        self.log_diag(message)
