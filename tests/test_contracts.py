import unittest

from maybepy import NOTHING, just, zip_maybes, lift, ContractViolation, ArityError, MaybeError


class TestContractViolations(unittest.TestCase):
    def test_flat_map_must_return_maybe(self):
        with self.assertRaises(ContractViolation) as cm:
            just(1).flat_map(lambda x: x + 1)
        self.assertIsInstance(cm.exception, TypeError)
        self.assertIsInstance(cm.exception, MaybeError)
        self.assertEqual(cm.exception.op, "flat_map")
        self.assertEqual(cm.exception.got, 2)
        self.assertIn("int", str(cm.exception))

    def test_flat_map_none_is_not_nothing(self):
        with self.assertRaises(ContractViolation):
            just(1).flat_map(lambda x: None)

    def test_functions_must_be_callable(self):
        for m in (just(1), NOTHING):
            with self.subTest(m=m):
                with self.assertRaises(ContractViolation):
                    m.map(3)
                with self.assertRaises(ContractViolation):
                    m.flat_map("f")
                with self.assertRaises(ContractViolation):
                    m.get_or_else(0)
                with self.assertRaises(ContractViolation):
                    m.filter(None)
                with self.assertRaises(ContractViolation):
                    m.or_else(just(2))

    def test_ap_requires_maybe_of_callable(self):
        for m in (just(1), NOTHING):
            with self.subTest(m=m):
                with self.assertRaises(ContractViolation):
                    m.ap(lambda x: x)
                with self.assertRaises(ContractViolation):
                    m.ap(just(5))

    def test_or_else_supplier_must_return_maybe(self):
        with self.assertRaises(ContractViolation):
            NOTHING.or_else(lambda: 5)

    def test_zip_and_lift_require_maybes(self):
        with self.assertRaises(ContractViolation):
            zip_maybes(just(1), 2)
        with self.assertRaises(ContractViolation):
            lift(lambda a, b: a, just(1), None)
        with self.assertRaises(ContractViolation):
            lift("not callable", just(1))

    def test_arity_error_is_a_contract_violation(self):
        with self.assertRaises(ContractViolation) as cm:
            lift(lambda a: a, just(1), just(2))
        self.assertIsInstance(cm.exception, ArityError)
        self.assertEqual(cm.exception.op, "lift")
        self.assertIn("2 positional", str(cm.exception))

    def test_user_errors_pass_through_unchanged(self):
        err = KeyError("missing")
        def boom(_):
            raise err
        for op in ("map", "flat_map", "filter"):
            with self.subTest(op=op):
                with self.assertRaises(KeyError) as cm:
                    getattr(just(1), op)(boom)
                self.assertIs(cm.exception, err)
        with self.assertRaises(KeyError):
            just(1).ap(just(boom))


if __name__ == "__main__":
    unittest.main()
