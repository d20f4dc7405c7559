# Copyright (c) 2024, Cupom Verde
# License: GNU General Public License v3

"""
Logging utility tests
"""

import logging
import unittest

from cupomverde.utils.logging import MaskCPFFilter, get_logger, mask_cpf


class TestMaskCpf(unittest.TestCase):

    def test_masks_raw_and_formatted(self):
        masked = mask_cpf("cpf=529.982.247-25 outro=52998224725")
        self.assertNotIn("529", masked)
        self.assertEqual(masked.count("***CPF***"), 2)

    def test_longer_digit_runs_untouched(self):
        chave = "35200714200166000187650010000000011000000017"
        self.assertEqual(mask_cpf(chave), chave)

    def test_filter_masks_args_and_extra(self):
        record = logging.LogRecord(
            name="cupomverde.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="cpf=%s",
            args=("52998224725",),
            exc_info=None,
        )
        record.cpf = "529.982.247-25"
        self.assertTrue(MaskCPFFilter().filter(record))
        self.assertEqual(record.getMessage(), "cpf=***CPF***")
        self.assertEqual(record.cpf, "***CPF***")


class TestGetLogger(unittest.TestCase):

    def test_namespace(self):
        self.assertEqual(get_logger().name, "cupomverde")
        self.assertEqual(get_logger("http").name, "cupomverde.http")

    def test_filter_attached_once(self):
        get_logger("test_once")
        logger = get_logger("test_once")
        self.assertEqual(sum(isinstance(f, MaskCPFFilter) for f in logger.filters), 1)
