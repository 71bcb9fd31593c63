#!/usr/bin/env python3
"""
Image Metadata Function entry point

Hands invocations to the metadata writer through the Fn FDK. Run with
--local to push a single event from stdin through the pipeline without the
function platform:

    python func.py --local < event.json
"""

import sys

import fdk

from functions.metadata_writer.index import handler, run
from functions.shared.log_utils import invocation_logger


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if '--local' in argv:
        with invocation_logger() as logger:
            state = run(sys.stdin.buffer, logger)
            logger.info(f"Invocation finished: {state.value}")
        return

    fdk.handle(handler)


if __name__ == '__main__':
    main()
