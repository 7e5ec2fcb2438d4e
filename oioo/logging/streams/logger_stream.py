import datetime
import io
import os
import pathlib
import sys
import threading
from typing import (
    Callable,
    Dict,
    TextIO,
    TypeVar,
)

import msgspec

from oioo.logging.config.logging_config import LoggingConfig
from oioo.logging.config.stream_type import StreamType
from oioo.logging.models import Entry, Log, LogLevel

T = TypeVar('T', bound=Entry)


class LoggerStream:
    """
    Synchronous log stream.

    Entries are rendered through a template onto stdout or stderr (per the
    global LoggingConfig). When a filename is given each entry is also
    appended to that logfile as a msgspec-encoded JSON line. A failing
    write is reported on stderr and never raised into the caller.
    """

    def __init__(
        self,
        name: str | None = None,
        template: str | None = None,
        filename: str | None = None,
        directory: str | None = None,
    ) -> None:
        if name is None:
            name = "default"

        self._name = name
        self._default_template = template
        self._default_logfile = filename
        self._default_log_directory = directory

        self._files: Dict[str, io.BufferedRandom] = {}
        self._config = LoggingConfig()
        self._closed = False

    @property
    def name(self):
        return self._name

    @property
    def closed(self):
        return self._closed

    @property
    def logfile(self) -> str | None:
        if self._default_logfile is None:
            return None

        return self._to_logfile_path(self._default_logfile)

    def enabled(self, level: LogLevel) -> bool:
        return self._closed is False and self._config.enabled(self._name, level)

    def open_file(self, filename: str) -> str:
        logfile_path = self._to_logfile_path(filename)

        if (logfile := self._files.get(logfile_path)) is None or logfile.closed:
            path = pathlib.Path(logfile_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._files[logfile_path] = open(path, 'ab+')

        return logfile_path

    def close(self):
        for logfile in self._files.values():
            if logfile.closed is False:
                logfile.close()

        self._files.clear()
        self._closed = True

    def _to_logfile_path(self, filename: str):
        filename_path = pathlib.Path(filename)

        assert (
            filename_path.suffix == ".json"
        ), "Err. - file must be JSON file for logs."

        directory = self._default_log_directory or os.getcwd()

        return str(pathlib.Path(directory, filename_path.name).absolute())

    def log(
        self,
        entry: T,
        template: str | None = None,
        filter: Callable[[T], bool] | None = None,
    ):
        if self.enabled(entry.level) is False:
            return

        if filter and filter(entry) is False:
            return

        if template is None:
            template = self._default_template

        log_file, line_number, function_name = self._find_caller()

        log = Log(
            entry=entry,
            filename=log_file,
            function_name=function_name,
            line_number=line_number,
        )

        self._log(log, template=template)

        if self._default_logfile:
            self._write_to_file(
                log,
                self.open_file(self._default_logfile),
            )

    def _stream_for(self, stream_type: StreamType) -> TextIO:
        if stream_type == StreamType.STDOUT:
            return sys.stdout

        return sys.stderr

    def _log(
        self,
        log: Log[T],
        template: str | None = None,
    ):
        if template is None:
            template = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"

        stream = self._stream_for(self._config.output)

        try:
            stream.write(
                log.entry.to_template(
                    template,
                    context={
                        "filename": log.filename,
                        "function_name": log.function_name,
                        "line_number": log.line_number,
                        "thread_id": log.thread_id,
                        "timestamp": log.timestamp,
                    },
                )
                + "\n"
            )
            stream.flush()

        except Exception as err:
            self._report_error(log, err)

    def _write_to_file(
        self,
        log: Log,
        logfile_path: str,
    ):
        try:
            if (
                logfile := self._files.get(logfile_path)
            ) and (
                logfile.closed is False
            ):

                logfile.write(msgspec.json.encode(log) + b"\n")
                logfile.flush()

        except Exception as err:
            self._report_error(log, err)

    def _report_error(self, log: Log, err: Exception):
        error_template = "{timestamp} - {level} - {thread_id}.{filename}:{function_name}.{line_number} - {error}"

        if sys.stderr.closed is False:
            sys.stderr.write(
                log.entry.to_template(
                    error_template,
                    context={
                        "filename": log.filename,
                        "function_name": log.function_name,
                        "line_number": log.line_number,
                        "error": str(err),
                        "thread_id": threading.get_native_id(),
                        "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
                    },
                )
                + "\n"
            )

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(2)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )
