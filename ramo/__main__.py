import argparse
import logging

from ramo.app import RamoApp
from ramo.config import Settings, configure_logging
from ramo.sources import detect_source


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="ramo",
        description="Browse a JSON field of a record as a collapsible tree.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Payload__c field of a record exported to disk
  ramo case-0001.json

  # Another field, straight from a record API
  ramo https://example.com/records/0001 --field Response__c

  # Any plain JSON file
  ramo data.json --whole-document
""",
    )
    parser.add_argument("target", help="Path or http(s) URL of the record")
    parser.add_argument("--field", help="Field holding the JSON text (default: Payload__c)")
    parser.add_argument("--whole-document", action="store_true", help="Show the whole target instead of one field")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    parser.add_argument("--log-file", help="Where debug logs are written")
    return parser.parse_args(argv)


def build_settings(args) -> Settings:
    settings = Settings()
    settings.target = args.target
    if args.field:
        settings.field_name = args.field
    if args.whole_document:
        settings.field_name = None
    if args.timeout is not None:
        settings.timeout = args.timeout
    if args.log_file:
        settings.log_file = args.log_file
    return settings


def main(argv=None):
    """ Entrypoint when is installed via pip """
    settings = build_settings(parse_args(argv))
    configure_logging(settings)
    logging.info(f"Starting ramo for {settings.target}")

    app = RamoApp(settings, detect_source(settings.target, settings))
    app.run()

# Development mode
if __name__ == "__main__":
    main()
