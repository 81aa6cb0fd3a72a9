#!/usr/bin/env python3
"""Basic usage example"""

from leveled_logger import LoggerBuilder, Logger, NilLogger, StdoutLogger, UndefinedLevelError

def main():
    # Default logger writes timestamped lines to stdout
    logger = Logger()
    logger.informational("Application started")

    # Fan out to stdout and a file, in that order
    logger = (LoggerBuilder()
        .with_console(timestamps=True)
        .with_file("logs/example.log")
        .build())

    logger.emergency("This is emergency")
    logger.alert("This is alert")
    logger.critical("This is critical")
    logger.error("This is error", ["code=42", "retry=false"])
    logger.warning("This is warning")
    logger.notice("This is notice")
    logger.informational("This is informational")
    logger.debug("This is debug")

    try:
        logger.log(99, "never written")
    except UndefinedLevelError as e:
        print(f"Rejected: {e}")

    # Silence a component that requires a logger
    quiet = Logger([NilLogger()])
    quiet.debug("dropped")

    logger.close()
    StdoutLogger().notice("Done")

if __name__ == "__main__":
    main()
