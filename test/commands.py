"""
Commands module behavioral tests (path resolution, processing, payload decoding).

Scope
- Validate the subcommand walk: path segments, residual options, first-child tie-break.
- Validate process(): spaced path and argument table for the reference scenarios.
- Validate decode(): raw payloads, whole interactions and resolved references.

Conventions
- Test method names follow CamelCase per project convention.
- Tests use the public API (resolve, process, decode, InteractionNode, OptionKind).
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from slashdecode import (
    InteractionNode,
    OptionKind,
    StringValue,
    IntegerValue,
    ChannelValue,
    PartialChannel,
    MissingValueError,
    SEPARATOR,
    resolve,
    process,
    decode,
)


def leaf(name, kind, value):
    return InteractionNode(name, kind=kind, resolved=value)


def group(name, *children, kind=OptionKind.SUB_COMMAND):
    return InteractionNode(name, kind=kind, children=children)


class TestResolve(TestCase):
    """Behavioral tests for the subcommand walk."""

    def testRootWithoutChildren(self):
        path, options = resolve(InteractionNode("ping"))
        self.assertEqual(path, ("ping",))
        self.assertEqual(options, ())

    def testRootWithLeavesKeepsChildrenUnchanged(self):
        children = (
            leaf("text", OptionKind.STRING, StringValue("hi")),
            leaf("integer", OptionKind.INTEGER, IntegerValue(42)),
        )
        root = InteractionNode("foo", children=children)
        path, options = resolve(root)
        self.assertEqual(path, ("foo",))
        self.assertEqual(options, children)

    def testSubcommandGroupChain(self):
        reason = leaf("reason", OptionKind.STRING, StringValue("spam"))
        root = InteractionNode("mod", children=[
            group("members", group("ban", reason), kind=OptionKind.SUB_COMMAND_GROUP),
        ])
        path, options = resolve(root)
        self.assertEqual(path, ("mod", "members", "ban"))
        self.assertEqual(options, (reason,))

    def testDeepChainHasOneSegmentPerLevel(self):
        node = group("level5")
        for index in reversed(range(5)):
            node = group(f"level{index}", node)
        root = InteractionNode("deep", children=[node])
        path, options = resolve(root)
        self.assertEqual(len(path), 7)
        self.assertEqual(path[0], "deep")
        self.assertEqual(list(path[1:]), [f"level{index}" for index in range(6)])
        self.assertEqual(options, ())

    def testOnlyFirstChildDecides(self):
        first = leaf("text", OptionKind.STRING, StringValue("x"))
        second = group("hidden", leaf("n", OptionKind.INTEGER, IntegerValue(1)))
        path, options = resolve(InteractionNode("foo", children=[first, second]))
        self.assertEqual(path, ("foo",))
        self.assertEqual(options, (first, second))

    def testFirstSubcommandWinsOverSiblings(self):
        chosen = group("one", leaf("a", OptionKind.STRING, StringValue("a")))
        ignored = group("two", leaf("b", OptionKind.STRING, StringValue("b")))
        path, options = resolve(InteractionNode("foo", children=[chosen, ignored]))
        self.assertEqual(path, ("foo", "one"))
        self.assertEqual([option.name for option in options], ["a"])

    def testRejectsNonNode(self):
        with self.assertRaises(TypeError):
            resolve({"name": "foo"})


class TestProcess(TestCase):
    """Behavioral tests for process() on the reference scenarios."""

    def testFlatCommand(self):
        general = PartialChannel(id=41771983423143937, name="general", kind=0)
        root = InteractionNode("foo", children=[
            leaf("text", OptionKind.STRING, StringValue("hi")),
            leaf("channel", OptionKind.CHANNEL, ChannelValue(general)),
            leaf("integer", OptionKind.INTEGER, IntegerValue(42)),
        ])
        path, arguments = process(root)
        self.assertEqual(path, "foo")
        self.assertEqual(arguments.get_string("text"), "hi")
        self.assertEqual(arguments.get_channel("channel").name, "general")
        self.assertEqual(arguments.get_integer("integer"), 42)

    def testOptionalArgumentNotSent(self):
        root = InteractionNode("foo", children=[leaf("text", OptionKind.STRING, StringValue("hi"))])
        _, arguments = process(root)
        with self.assertRaises(MissingValueError) as context:
            arguments.get_integer("integer")
        self.assertEqual(context.exception.name, "integer")
        self.assertEqual(arguments.get_string("text"), "hi")

    def testNestedPathIsSpaceJoined(self):
        root = InteractionNode("mod", children=[
            group("ban", leaf("reason", OptionKind.STRING, StringValue("spam"))),
        ])
        path, arguments = process(root)
        self.assertEqual(path, "mod ban")
        self.assertEqual(path.split(SEPARATOR), ["mod", "ban"])
        self.assertEqual(arguments.get_string("reason"), "spam")

    def testZeroArgumentsGiveEmptyTable(self):
        path, arguments = process(InteractionNode("mod", children=[group("list")]))
        self.assertEqual(path, "mod list")
        self.assertEqual(len(arguments), 0)
        with self.assertRaises(MissingValueError):
            arguments.get_boolean("anything")

    def testIndependentDecodesShareNothing(self):
        root = InteractionNode("foo", children=[leaf("text", OptionKind.STRING, StringValue("hi"))])
        _, first = process(root)
        _, second = process(root)
        self.assertIsNot(first, second)
        self.assertEqual(dict(first), dict(second))


class TestDecode(TestCase):
    """Behavioral tests for decode() on raw payloads."""

    def setUp(self):
        self.payload = {
            "id": "867794291820986368",
            "name": "mod",
            "type": 1,
            "options": [
                {
                    "name": "ban",
                    "type": 1,
                    "options": [
                        {"name": "target", "type": 6, "value": "80351110224678912"},
                        {"name": "reason", "type": 3, "value": "spam"},
                        {"name": "days", "type": 4, "value": 7},
                    ],
                },
            ],
            "resolved": {
                "users": {
                    "80351110224678912": {
                        "id": "80351110224678912",
                        "username": "nelly",
                        "discriminator": "0",
                    },
                },
                "members": {
                    "80351110224678912": {"nick": "nel", "roles": ["41771983423143936"]},
                },
            },
        }

    def testDataObject(self):
        path, arguments = decode(self.payload)
        self.assertEqual(path, "mod ban")
        self.assertEqual(arguments.get_string("reason"), "spam")
        self.assertEqual(arguments.get_integer("days"), 7)
        target = arguments.get_user("target")
        self.assertEqual(target.user.id, 80351110224678912)
        self.assertEqual(target.member.nick, "nel")

    def testWholeInteraction(self):
        path, arguments = decode({"id": "1", "type": 2, "data": self.payload})
        self.assertEqual(path, "mod ban")
        self.assertEqual(set(arguments), {"target", "reason", "days"})

    def testUnresolvedReferenceIsMissing(self):
        del self.payload["resolved"]["users"]
        _, arguments = decode(self.payload)
        self.assertIn("target", arguments)
        with self.assertRaises(MissingValueError):
            arguments.get_user("target")

    def testRejectsNonMapping(self):
        with self.assertRaises(TypeError):
            decode([("name", "foo")])


if __name__ == "__main__":
    unittest.main()
