import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from linked_list import LinkedList


class TestLinkedList(unittest.TestCase):

    def test_new_list_is_empty(self):
        lst = LinkedList()
        self.assertEqual(lst.size(), 0)
        self.assertTrue(lst.is_empty())
        self.assertFalse(lst)

    def test_push_back_grows_list(self):
        lst = LinkedList()
        lst.push_back(1)
        lst.push_back(2)
        self.assertEqual(lst.size(), 2)
        self.assertEqual(len(lst), 2)
        self.assertTrue(lst)

    def test_pop_front_is_first_in_first_out(self):
        lst = LinkedList()
        for value in (10, 20, 30):
            lst.push_back(value)
        self.assertEqual(lst.pop_front(), 10)
        self.assertEqual(lst.pop_front(), 20)
        self.assertEqual(lst.pop_front(), 30)
        self.assertTrue(lst.is_empty())

    def test_pop_front_on_empty_raises(self):
        lst = LinkedList()
        with self.assertRaises(IndexError):
            lst.pop_front()

    def test_push_after_draining(self):
        lst = LinkedList()
        lst.push_back("a")
        lst.pop_front()
        lst.push_back("b")
        lst.push_back("c")
        self.assertEqual(lst.pop_front(), "b")
        self.assertEqual(lst.pop_front(), "c")

    def test_holds_arbitrary_objects(self):
        lst = LinkedList()
        item = {"key": [1, 2]}
        lst.push_back(item)
        self.assertIs(lst.pop_front(), item)


if __name__ == "__main__":
    unittest.main()
