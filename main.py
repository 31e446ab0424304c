from rich.pretty import pprint

from slashdecode import *

__prog__ = "demo-bot"

payload = {
    "name": "foo",
    "options": [
        {"name": "text", "type": 3, "value": "hi"},
        {"name": "channel", "type": 7, "value": "41771983423143937"},
    ],
    "resolved": {
        "channels": {
            "41771983423143937": {"id": "41771983423143937", "name": "general", "type": 0},
        },
    },
}


if __name__ == '__main__':
    path, arguments = decode(payload)
    pprint(path)
    pprint(arguments)
    try:
        arguments.get_integer("integer")
    except MissingValueError as exception:
        trigger(exception, shell=True, fancy=True)
