"""
Script Handler

Runs a batch of address book operations against an address book owned by
the caller:
- Parses the operation list from a script event
- Dispatches each operation to the AddressBook
- Collects per-operation results into a JSON response

Also provides the `address-book` command line entry point, which runs a
JSON script file or the built-in demo scenario.
"""

import argparse
import json
import logging
import sys
from typing import Dict, Any, List, Optional

from ..address_book.address_book import AddressBook
from ..config.config_manager import AddressBookConfig, ConfigManager
from ..models.book_models import OperationResult
from ..models.contact_models import Contact, normalize_field_name
from ..notifications.message_formatter import OperationMessageFormatter

# Configure logging
logger = logging.getLogger(__name__)


def _demo_contact(first_name: str, email: str, state: str = "UttarPradesh") -> Dict[str, str]:
    return {
        "firstName": first_name,
        "lastName": "Sharma",
        "address": "Mathura",
        "city": "CityName",
        "state": state,
        "zip": "281001",
        "phone": "1234567890",
        "email": email,
    }


DEMO_SCRIPT: Dict[str, Any] = {
    "operations": [
        {"op": "add", "contact": _demo_contact("Dheeraj", "dheeraj@gmail.com")},
        {"op": "add", "contact": _demo_contact("Abc", "abc@gmail.com")},
        {"op": "add", "contact": _demo_contact("Priyanshu", "priyanshu@gmail.com")},
        {"op": "add", "contact": _demo_contact("Xyz", "xyz@gmail.com")},
        {"op": "add", "contact": _demo_contact("Sohan", "Sohan@gmail.com", state="Agra")},
        {"op": "display"},
        {"op": "edit", "name": "Xyz", "updates": {"city": "NewCity", "phone": "9876543210"}},
        {"op": "delete", "name": "Abc"},
        {"op": "count"},
        {"op": "add", "contact": _demo_contact("Sohan", "Sohan@gmail.com")},
        {"op": "search", "location": "Mathura"},
        {"op": "search", "location": "Agra"},
        {"op": "group"},
        {"op": "count_by_location"},
        {"op": "sort"},
    ]
}


class ScriptHandler:
    """Dispatches scripted operations to a caller-owned address book."""

    def __init__(self,
                 address_book: Optional[AddressBook] = None,
                 config: Optional[AddressBookConfig] = None):
        """Initialize the script handler.

        Args:
            address_book: Address book to operate on (a new empty one if omitted)
            config: Configuration used when a new address book is created
        """
        self.address_book = address_book if address_book is not None else AddressBook(config=config)
        self.formatter = OperationMessageFormatter()
        self._dispatch = {
            "add": self._handle_add,
            "display": self._handle_display,
            "edit": self._handle_edit,
            "edit_strict": self._handle_edit_strict,
            "delete": self._handle_delete,
            "count": self._handle_count,
            "search": self._handle_search,
            "group": self._handle_group,
            "count_by_location": self._handle_count_by_location,
            "sort": self._handle_sort,
        }

    def handle_script(self, event: Dict[str, Any]) -> Dict[str, Any]:
        """
        Run every operation in a script event.

        Args:
            event: Dict with an "operations" list of operation dicts

        Returns:
            Dict containing statusCode and a JSON body with per-operation results
        """
        try:
            operations = event.get("operations", [])
            if not isinstance(operations, list):
                raise ValueError("operations must be a list")

            logger.info(f"Processing script with {len(operations)} operations")

            results = []
            for index, operation in enumerate(operations):
                try:
                    results.append(self.process_operation(operation))
                except Exception as e:
                    logger.error(f"Failed to process operation {index}: {e}")
                    results.append({
                        "index": index,
                        "op": operation.get("op") if isinstance(operation, dict) else None,
                        "status": "failed",
                        "error": str(e)
                    })

            logger.info(f"Completed processing {len(results)} operations")

            return {
                "statusCode": 200,
                "body": json.dumps({
                    "message": f"Processed {len(results)} operations",
                    "results": results,
                    "contacts": self.address_book.to_dict_list()
                })
            }

        except Exception as e:
            logger.error(f"Unexpected error in script handler: {e}")
            return {
                "statusCode": 500,
                "body": json.dumps({
                    "error": "Internal error",
                    "message": str(e)
                })
            }

    def process_operation(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        """
        Process a single scripted operation.

        Raises:
            ValueError: If the operation is malformed or unknown
        """
        if not isinstance(operation, dict):
            raise ValueError(f"Operation must be an object, got {type(operation).__name__}")

        op = operation.get("op")
        handler = self._dispatch.get(op)
        if handler is None:
            raise ValueError(f"Unknown operation: {op}")

        return {"op": op, **handler(operation)}

    def _handle_add(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        contact_data = operation.get("contact")
        if not isinstance(contact_data, dict):
            raise ValueError("add requires a 'contact' object")

        fields = {normalize_field_name(key): value for key, value in contact_data.items()}
        missing = [name for name in Contact.field_names() if name not in fields]
        if missing:
            raise ValueError(f"add is missing fields: {', '.join(missing)}")
        unknown = [name for name in fields if name not in Contact.field_names()]
        if unknown:
            raise ValueError(f"add has unknown fields: {', '.join(unknown)}")

        return self._result(self.address_book.add_contact(**fields))

    def _handle_display(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        return {"status": "success", "contacts": self.address_book.display_contacts()}

    def _handle_edit(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        name, updates = self._edit_arguments(operation)
        return self._result(self.address_book.find_and_edit_contact(name, updates))

    def _handle_edit_strict(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        name, updates = self._edit_arguments(operation)
        return self._result(self.address_book.find_and_edit_contact_strict(name, updates))

    def _handle_delete(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        return self._result(self.address_book.find_and_delete_contact(self._required(operation, "name")))

    def _handle_count(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        return {"status": "success", "count": self.address_book.get_contact_count()}

    def _handle_search(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        location = self._required(operation, "location")
        matches = self.address_book.search_by_city_or_state(location)
        return {
            "status": "success",
            "location": location,
            "contacts": [contact.display_contact() for contact in matches]
        }

    def _handle_group(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        grouping = self.address_book.view_persons_by_city_or_state()
        logger.info(self.formatter.format_grouping(grouping))
        return {"status": "success", "by_city": grouping.by_city, "by_state": grouping.by_state}

    def _handle_count_by_location(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        counts = self.address_book.get_contact_count_by_city_or_state()
        logger.info(self.formatter.format_counts(counts))
        return {"status": "success", "by_city": counts.by_city, "by_state": counts.by_state}

    def _handle_sort(self, operation: Dict[str, Any]) -> Dict[str, Any]:
        return {"status": "success", "contacts": self.address_book.sort_contacts_by_name()}

    def _edit_arguments(self, operation: Dict[str, Any]):
        name = self._required(operation, "name")
        updates = operation.get("updates")
        if not isinstance(updates, dict):
            raise ValueError("edit requires an 'updates' object")
        return name, updates

    @staticmethod
    def _required(operation: Dict[str, Any], key: str) -> str:
        value = operation.get(key)
        if not isinstance(value, str):
            raise ValueError(f"{operation.get('op')} requires a '{key}' string")
        return value

    @staticmethod
    def _result(result: OperationResult) -> Dict[str, Any]:
        data = result.to_dict()
        data.pop("operation")
        return data


def configure_logging(level: str) -> None:
    """Set up root logging for command line use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="address-book",
        description="Run a script of address book operations."
    )
    parser.add_argument(
        "--script",
        help="Path to a JSON file with an 'operations' list (default: built-in demo)"
    )
    parser.add_argument(
        "--log-level",
        help="Override the ADDRESS_BOOK_LOG_LEVEL setting"
    )
    return parser


def load_script(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, list):
        return {"operations": data}
    return data


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command line entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    config_manager = ConfigManager()
    try:
        config = config_manager.load_from_env()
        if args.log_level:
            config = config_manager.update_config({"log_level": args.log_level})
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)

    if args.script:
        try:
            event = load_script(args.script)
        except (OSError, ValueError) as e:
            logger.error(f"Could not load script {args.script}: {e}")
            return 2
    else:
        event = DEMO_SCRIPT

    handler = ScriptHandler(config=config)
    response = handler.handle_script(event)
    print(json.dumps(json.loads(response["body"]), indent=2))
    return 0 if response["statusCode"] == 200 else 1


if __name__ == "__main__":
    sys.exit(main())
