"""
Tests for the internal helpers (Unset sentinel, coalesce, rename, mirror).
"""
import copy
import pickle
import unittest
from unittest import TestCase

from slashdecode.utils import *


class UnsetTest(TestCase):
    """
    The sentinel is a falsy, sealed singleton that survives copying and pickling.
    """

    def testSingleton(self) -> None:
        self.assertIs(UnsetType(), Unset)

    def testFalsyButNotNone(self) -> None:
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)
        self.assertNotEqual(Unset, None)

    def testRepr(self) -> None:
        self.assertEqual(repr(Unset), "Unset")

    def testCopyAndPickle(self) -> None:
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)

    def testFinalClass(self) -> None:
        with self.assertRaises(TypeError):
            type("UnsetType", (UnsetType,), {})


class HelpersTest(TestCase):

    def testCoalesce(self) -> None:
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce(0, 1), 0)

    def testRenameForms(self) -> None:
        def work():
            pass

        self.assertIs(rename(work, "job"), work)
        self.assertEqual((work.__name__, work.__qualname__), ("job", "job"))

        @rename("task")
        def other():
            pass

        self.assertEqual(other.__name__, "task")

    def testRenameArity(self) -> None:
        with self.assertRaises(TypeError):
            rename()
        with self.assertRaises(TypeError):
            rename(len, "size")

    def testMirrorHandsOutCopies(self) -> None:
        class Holder:
            items = mirror("items")

            def __init__(self):
                self._items = ({"a": [1]},)

        holder = Holder()
        items = holder.items
        items[0]["a"].append(2)
        self.assertEqual(holder.items, [{"a": [1]}])
        with self.assertRaises(AttributeError):
            holder.items = []


if __name__ == '__main__':
    unittest.main()
