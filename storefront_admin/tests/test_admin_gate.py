# storefront_admin/tests/test_admin_gate.py

from django.test import SimpleTestCase

from storefront_admin.admin_gate import LOCKED, UNLOCKED, AdminGate
from storefront_admin.persistence import MemorySlots


class AdminGateTests(SimpleTestCase):

    def setUp(self):
        self.slots = MemorySlots()
        self.gate = AdminGate(self.slots, key="pw", default_secret="Secret#1", last_login_key="last")

    def test_ensure_writes_default_only_when_empty(self):
        self.gate.ensure()
        self.assertEqual(self.slots.get("pw"), "Secret#1")

        self.slots.set("pw", "custom")
        self.gate.ensure()
        self.assertEqual(self.slots.get("pw"), "custom")

    def test_verify_is_exact_and_case_sensitive(self):
        self.gate.ensure()

        self.assertFalse(self.gate.verify("secret#1"))
        self.assertFalse(self.gate.verify("SECRET#1"))
        self.assertFalse(self.gate.verify("Secret#1 "))
        self.assertEqual(self.gate.state, LOCKED)

        self.assertTrue(self.gate.verify("Secret#1"))
        self.assertEqual(self.gate.state, UNLOCKED)

    def test_verify_rejects_non_strings(self):
        self.gate.ensure()
        self.assertFalse(self.gate.verify(None))
        self.assertFalse(self.gate.verify(123))

    def test_unlocked_state_is_not_persisted(self):
        self.gate.ensure()
        self.gate.verify("Secret#1")

        reloaded = AdminGate(self.slots, key="pw", default_secret="Secret#1", last_login_key="last")
        self.assertFalse(reloaded.is_unlocked)

    def test_lock(self):
        self.gate.ensure()
        self.gate.verify("Secret#1")
        self.gate.lock()
        self.assertFalse(self.gate.is_unlocked)

    def test_change_then_reset(self):
        self.gate.ensure()
        self.gate.change("n3w")
        self.assertFalse(self.gate.verify("Secret#1"))
        self.assertTrue(self.gate.verify("n3w"))

        self.gate.reset()
        self.assertTrue(self.gate.verify("Secret#1"))

    def test_remember_records_last_login(self):
        self.gate.ensure()
        self.assertIsNone(self.gate.last_login())

        self.gate.verify("Secret#1")
        self.assertIsNone(self.gate.last_login())

        self.gate.verify("Secret#1", remember=True)
        self.assertTrue(self.gate.last_login())

    def test_secret_lives_outside_store_slot(self):
        self.gate.ensure()
        self.assertEqual(list(self.slots._data), ["pw"])
