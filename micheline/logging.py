# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Logging setup for applications that embed the codec.

The codec only ever calls `structlog.get_logger()`, it never configures anything. An application that has no logging
setup of its own can call `setup_logging` once at startup to render structlog events through the stdlib `logging`
module. The codec logs under the `micheline` logger, so its rejected-data debug events can be turned on without
touching the verbosity of everything else.
"""

from collections import OrderedDict
from enum import IntEnum, auto
from typing import Any, Optional

import structlog
from structlog.typing import EventDict
from typing_extensions import assert_never

CODEC_LOGGER_NAME = 'micheline'


class LoggingOutput(IntEnum):
    NULL = auto()
    PRETTY = auto()
    JSON = auto()


def setup_logging(
    *,
    logging_output: LoggingOutput,
    debug: bool = False,
    extra_log_info: Optional[dict[str, str]] = None,
) -> None:
    """Configure structlog to render through the stdlib logging module.

    `debug` only affects the codec loggers, other loggers stay at INFO.
    """
    import logging
    import logging.config

    timestamper = structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S")

    # processors for foreign (stdlib) loggers
    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]

    match logging_output:
        case LoggingOutput.NULL:
            formatter = None
        case LoggingOutput.PRETTY:
            formatter = structlog.dev.ConsoleRenderer(colors=True)
        case LoggingOutput.JSON:
            formatter = structlog.processors.JSONRenderer()
        case _:
            assert_never(logging_output)

    if formatter is None:
        handler: dict[str, Any] = {'class': 'logging.NullHandler'}
    else:
        handler = {'level': 'DEBUG', 'class': 'logging.StreamHandler', 'formatter': 'structlog'}

    # See: https://docs.python.org/3/library/logging.config.html#configuration-dictionary-schema
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'structlog': {
                '()': structlog.stdlib.ProcessorFormatter,
                'processor': formatter or structlog.processors.KeyValueRenderer(),
                'foreign_pre_chain': pre_chain,
            },
        },
        'handlers': {
            'default': handler,
        },
        'loggers': {
            CODEC_LOGGER_NAME: {
                'handlers': ['default'],
                'level': 'DEBUG' if debug else 'INFO',
                'propagate': False,
            },
            '': {
                'handlers': ['default'],
                'level': 'INFO',
            },
        },
    })

    extra_log_info = extra_log_info or {}

    def add_extra_log_info(_logger: logging.Logger, _method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in extra_log_info.items():
            assert key not in event_dict, 'extra log info conflicting with existing log key'
            event_dict[key] = value
        return event_dict

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_extra_log_info,
        structlog.stdlib.PositionalArgumentsFormatter(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        context_class=OrderedDict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
