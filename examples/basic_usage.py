#!/usr/bin/env python3
"""Basic usage example"""

from facility_logger import Logger, LoggerConfig, LogLevel

def main():
    # Create logger, hiding the noisy http facilities
    logger = Logger(LoggerConfig(level=LogLevel.DEBUG, filter="-^http"))

    logger.to_console(colorize=True)
    logger.to_file("logs/example.log", level=LogLevel.INFO)
    logger.to_json_file("logs/example.json", level=LogLevel.WARN)

    db = logger.facility("db")
    http = logger.facility("http.access")

    # Log messages
    logger.info("Application started")
    db.debug("Connecting", host="localhost", port=5432)
    db.notice("Connected")
    http.info("GET / 200")  # filtered out
    db.warn("Slow query", duration_ms=812)
    db.error("Query failed", ValueError("syntax error at or near 'SELEC'"))

    logger.set_filters("")
    http.info("GET /health 200")

    logger.close()

if __name__ == "__main__":
    main()
