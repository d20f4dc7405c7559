# Copyright (c) 2024, Cupom Verde
# License: GNU General Public License v3

"""
Validation utility tests
"""

import unittest

from cupomverde.exceptions import ValidationError
from cupomverde.utils.testing import TEST_API_KEY, VALID_CPF, VALID_CPF_FORMATTED
from cupomverde.utils.validators import (
    CPF_INVALID,
    CPF_NOT_INFORMED,
    XML_NOT_INFORMED,
    Validator,
    is_valid_cpf,
    normalize_cpf,
    validate_api_key,
    validate_receipt_key,
    validate_receipt_submission,
)


class TestValidator(unittest.TestCase):

    def test_first_error_of_a_field_wins(self):
        """A failed check skips the rest of the field's checks"""
        result = (Validator()
            .field("name", "")
            .required("required")
            .regex(r"^\d+$", "digits")
            .validate())
        self.assertFalse(result.is_valid)
        self.assertEqual([e.message for e in result.errors], ["required"])
        self.assertEqual(result.errors[0].code, "required")

    def test_new_field_resets_skip(self):
        result = (Validator()
            .field("a", None).required("a required")
            .field("b", "x").regex(r"^\d$", "b digit")
            .validate())
        self.assertEqual([e.field for e in result.errors], ["a", "b"])

    def test_raise_if_invalid(self):
        result = Validator().field("a", "").required("falhou").validate()
        with self.assertRaises(ValidationError) as ctx:
            result.raise_if_invalid()
        self.assertEqual(str(ctx.exception), "falhou")

    def test_valid_result_does_not_raise(self):
        Validator().field("a", "1").required("falhou").validate().raise_if_invalid()


class TestApiKey(unittest.TestCase):

    def test_uuid_is_valid(self):
        self.assertTrue(validate_api_key(TEST_API_KEY).is_valid)
        self.assertTrue(validate_api_key(TEST_API_KEY.upper()).is_valid)

    def test_non_uuid_is_invalid(self):
        for key in ("not-a-uuid", "56c1f1b89b5c41cdb8f7872be3500ad3", TEST_API_KEY + "0", " " + TEST_API_KEY, TEST_API_KEY + "\n"):
            with self.subTest(key=key):
                self.assertFalse(validate_api_key(key).is_valid)


class TestCpf(unittest.TestCase):

    def test_checksum(self):
        self.assertTrue(is_valid_cpf(VALID_CPF))
        self.assertTrue(is_valid_cpf(VALID_CPF_FORMATTED))
        self.assertFalse(is_valid_cpf("52998224720"))

    def test_repeated_digits_are_invalid(self):
        self.assertFalse(is_valid_cpf("00000000000"))
        self.assertFalse(is_valid_cpf("111.111.111-11"))

    def test_normalize_strips_punctuation(self):
        self.assertEqual(normalize_cpf("000.000.000-00"), "00000000000")
        self.assertEqual(normalize_cpf(VALID_CPF_FORMATTED), VALID_CPF)


class TestReceiptValidation(unittest.TestCase):

    def test_submission_order(self):
        cases = [
            (("", ""), XML_NOT_INFORMED),
            (("eG1s", None), CPF_NOT_INFORMED),
            (("eG1s", "00000000000"), CPF_INVALID),
        ]
        for args, message in cases:
            with self.subTest(args=args):
                result = validate_receipt_submission(*args)
                self.assertEqual(len(result.errors), 1)
                self.assertEqual(result.errors[0].message, message)

    def test_valid_submission(self):
        self.assertTrue(validate_receipt_submission("eG1s", VALID_CPF_FORMATTED).is_valid)

    def test_receipt_key(self):
        self.assertFalse(validate_receipt_key("").is_valid)
        self.assertTrue(validate_receipt_key("123").is_valid)
