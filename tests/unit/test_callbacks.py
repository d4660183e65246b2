import unittest

from unittest.mock import patch

from extended_set.utils import adapt_callback


class AdaptCallbackTests(unittest.TestCase):
    """
    Argument trimming and validation for user callbacks
    """

    def test_one_parameter_gets_first_argument(self):
        wrapped = adapt_callback(lambda x: x, "map")
        self.assertEqual(wrapped("item", "item", "set"), "item")

    def test_two_parameters_get_first_two_arguments(self):
        wrapped = adapt_callback(lambda acc, x: (acc, x), "reduce")
        self.assertEqual(wrapped(0, "item", "item", "set"), (0, "item"))

    def test_parameters_with_defaults_are_not_filled(self):
        def callback(x, y=None):
            return (x, y)

        wrapped = adapt_callback(callback, "map")
        self.assertEqual(wrapped("a", "a", "set"), ("a", None))

    def test_str_strip_gets_only_the_item(self):
        wrapped = adapt_callback(str.strip, "map")
        self.assertEqual(wrapped(" a ", " a ", "set"), "a")

    def test_round_gets_only_the_item(self):
        wrapped = adapt_callback(round, "map")
        self.assertEqual(wrapped(1.4, 1.4, "set"), 1)

    def test_dict_get_gets_only_the_key(self):
        wrapped = adapt_callback({1: "one"}.get, "map")
        self.assertEqual(wrapped(1, 1, "set"), "one")
        self.assertIsNone(wrapped(2, 2, "set"))

    def test_keyword_only_parameters_are_not_filled(self):
        def callback(x, *, flag=False):
            return (x, flag)

        wrapped = adapt_callback(callback, "filter")
        self.assertEqual(wrapped("a", "a", "set"), ("a", False))

    def test_varargs_callback_is_returned_as_is(self):
        def callback(*args):
            return args

        self.assertIs(adapt_callback(callback, "map"), callback)

    def test_zero_parameters(self):
        wrapped = adapt_callback(lambda: "called", "some")
        self.assertEqual(wrapped("a", "a", "set"), "called")

    def test_bound_method(self):
        seen = set()
        wrapped = adapt_callback(seen.add, "map")
        wrapped("a", "a", "set")
        self.assertEqual(seen, {"a"})

    def test_uninspectable_callable_uses_fallback(self):
        calls = []

        def callback(*args):
            calls.append(args)

        with patch("extended_set.utils.callbacks.inspect.signature", side_effect=ValueError):
            adapt_callback(callback, "map")("a", "a", "set")
            adapt_callback(callback, "reduce", fallback=2)(0, "a", "a", "set")

        self.assertEqual(calls, [("a",), (0, "a")])

    def test_not_callable_raises(self):
        with self.assertRaises(TypeError) as context:
            adapt_callback(42, "filter")
        self.assertIn("filter()", str(context.exception))
        self.assertIn("'int'", str(context.exception))


if __name__ == "__main__":
    unittest.main()
