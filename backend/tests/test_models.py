"""
Model tests for TaskManager laboratories
"""
from django.core.exceptions import ValidationError
from django.test import TestCase

from apps.accounts.models import ClientToken
from apps.laboratories.models import Laboratory

from .factories import CompletedLaboratoryFactory, LaboratoryFactory, UserFactory


class LaboratoryModelTest(TestCase):
    """Test Laboratory model validations and querysets"""

    def setUp(self):
        self.user = UserFactory()

    def test_new_laboratory_is_not_done(self):
        """Test done defaults to false"""
        laboratory = Laboratory(title='Write report', user=self.user)

        self.assertFalse(laboratory.done)

    def test_laboratory_has_all_attributes(self):
        """Test the factory fills every attribute"""
        laboratory = LaboratoryFactory(user=self.user)

        self.assertIsNotNone(laboratory.id)
        self.assertTrue(laboratory.title)
        self.assertTrue(laboratory.description)
        self.assertIsNotNone(laboratory.deadline)
        self.assertFalse(laboratory.done)
        self.assertEqual(laboratory.user_id, self.user.id)
        self.assertIsNotNone(laboratory.created_at)
        self.assertIsNotNone(laboratory.updated_at)

    def test_str_representation(self):
        laboratory = LaboratoryFactory(title='Fix the door', user=self.user)

        self.assertEqual(str(laboratory), 'Fix the door')

    def test_blank_title_is_invalid(self):
        """Test whitespace-only title fails model validation"""
        for title in ['', ' ', '   \t']:
            with self.subTest(title=repr(title)):
                laboratory = Laboratory(title=title, user=self.user)

                with self.assertRaises(ValidationError) as context:
                    laboratory.full_clean()

                self.assertIn('title', context.exception.message_dict)

    def test_user_is_required(self):
        """Test laboratory without owner fails validation"""
        laboratory = Laboratory(title='Orphan')

        with self.assertRaises(ValidationError) as context:
            laboratory.full_clean()

        self.assertIn('user', context.exception.message_dict)

    def test_owned_by_returns_only_user_records(self):
        LaboratoryFactory.create_batch(3, user=self.user)
        LaboratoryFactory.create_batch(2)

        owned = Laboratory.objects.owned_by(self.user)

        self.assertEqual(owned.count(), 3)
        self.assertTrue(all(lab.user_id == self.user.id for lab in owned))

    def test_pending_and_completed(self):
        LaboratoryFactory.create_batch(2, user=self.user)
        CompletedLaboratoryFactory(user=self.user)

        self.assertEqual(Laboratory.objects.owned_by(self.user).pending().count(), 2)
        self.assertEqual(Laboratory.objects.owned_by(self.user).completed().count(), 1)

    def test_default_ordering_by_id(self):
        first = LaboratoryFactory(title='Zebra', user=self.user)
        second = LaboratoryFactory(title='Apple', user=self.user)

        self.assertEqual(list(Laboratory.objects.owned_by(self.user)), [first, second])

    def test_laboratories_deleted_with_user(self):
        LaboratoryFactory.create_batch(2, user=self.user)

        self.user.delete()

        self.assertEqual(Laboratory.objects.count(), 0)


class ClientTokenModelTest(TestCase):
    """Test ClientToken issuing and matching"""

    def setUp(self):
        self.user = UserFactory()

    def test_issue_returns_auth_headers(self):
        auth_data = ClientToken.issue(self.user)

        self.assertEqual(auth_data['uid'], self.user.email)
        self.assertEqual(auth_data['token-type'], 'Bearer')
        self.assertTrue(auth_data['access-token'])
        self.assertTrue(auth_data['client'])
        self.assertTrue(auth_data['expiry'].isdigit())

    def test_token_is_stored_hashed(self):
        auth_data = ClientToken.issue(self.user)

        client_token = ClientToken.objects.get(user=self.user, client=auth_data['client'])
        self.assertNotEqual(client_token.token_digest, auth_data['access-token'])
        self.assertTrue(client_token.matches(auth_data['access-token']))
        self.assertFalse(client_token.matches('wrong-token'))

    def test_reissue_for_same_client_replaces_token(self):
        first = ClientToken.issue(self.user, client='web')
        second = ClientToken.issue(self.user, client='web')

        client_token = ClientToken.objects.get(user=self.user, client='web')
        self.assertEqual(ClientToken.objects.filter(user=self.user).count(), 1)
        self.assertFalse(client_token.matches(first['access-token']))
        self.assertTrue(client_token.matches(second['access-token']))

    def test_uid_falls_back_to_username(self):
        user = UserFactory(email='')

        auth_data = ClientToken.issue(user)

        self.assertEqual(auth_data['uid'], user.username)
