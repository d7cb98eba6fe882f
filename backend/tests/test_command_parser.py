import unittest

from voicepos.services.command_parser import (
    classify,
    CreditGrant,
    Payment,
    CashSale,
    StockIn,
    Unclassified,
)


class CommandParserTests(unittest.TestCase):
    def test_credit_grant(self):
        cmd = classify("Rahim 100 taka baki")
        self.assertEqual(cmd, CreditGrant(text="Rahim 100 taka baki", customer_name="Rahim", amount=100))

    def test_payment_keywords(self):
        for keyword in ("dilo", "payment", "paid"):
            cmd = classify(f"Karim 200 taka {keyword}")
            self.assertIsInstance(cmd, Payment)
            self.assertEqual(cmd.customer_name, "Karim")
            self.assertEqual(cmd.amount, 200)

    def test_cash_sale_with_price(self):
        cmd = classify("Rice 2 kg bikri 110 taka")
        self.assertIsInstance(cmd, CashSale)
        self.assertEqual(cmd.product_name, "Rice")
        self.assertEqual(cmd.quantity, 2.0)
        self.assertEqual(cmd.unit, "kg")
        self.assertEqual(cmd.amount, 110)

    def test_cash_sale_without_price_defaults_to_zero(self):
        cmd = classify("Oil 3 liter sale")
        self.assertIsInstance(cmd, CashSale)
        self.assertEqual(cmd.amount, 0)
        self.assertEqual(cmd.unit, "liter")

    def test_cash_sale_fractional_quantity(self):
        cmd = classify("Sugar 1.5 kg bikri 100 taka")
        self.assertIsInstance(cmd, CashSale)
        self.assertEqual(cmd.quantity, 1.5)

    def test_stock_in(self):
        for keyword in ("stock", "ashlo"):
            cmd = classify(f"Dal 5 kg {keyword}")
            self.assertIsInstance(cmd, StockIn)
            self.assertEqual(cmd.product_name, "Dal")
            self.assertEqual(cmd.quantity, 5.0)

    def test_case_insensitive_and_unit_normalised(self):
        cmd = classify("SALT 4 KG BIKRI 120 TAKA")
        self.assertIsInstance(cmd, CashSale)
        self.assertEqual(cmd.unit, "kg")
        self.assertEqual(cmd.amount, 120)

        cmd = classify("RAHIM 50 TAKA BAKI")
        self.assertIsInstance(cmd, CreditGrant)
        self.assertEqual(cmd.customer_name, "RAHIM")

    def test_pattern_found_anywhere_in_utterance(self):
        cmd = classify("aaj Rahim 100 taka baki nilo")
        self.assertIsInstance(cmd, CreditGrant)
        self.assertEqual(cmd.customer_name, "Rahim")

    def test_credit_pattern_wins_over_sale(self):
        # Both a sale and a credit template appear; credit is tried first.
        cmd = classify("Sugar 1 kg bikri 65 taka baki")
        self.assertIsInstance(cmd, CreditGrant)
        self.assertEqual(cmd.customer_name, "bikri")
        self.assertEqual(cmd.amount, 65)

    def test_stock_keyword_with_unknown_unit_is_unclassified(self):
        cmd = classify("Eggs 12 dozen stock")
        self.assertEqual(cmd, Unclassified(text="Eggs 12 dozen stock"))

    def test_unclassified(self):
        self.assertEqual(classify("asdf qwer"), Unclassified(text="asdf qwer"))
        self.assertEqual(classify(""), Unclassified(text=""))


if __name__ == "__main__":
    unittest.main()
