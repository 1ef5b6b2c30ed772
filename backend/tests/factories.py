"""
Factory Boy factories for generating test data
"""
import factory
from django.contrib.auth.models import User
from django.utils import timezone

from apps.laboratories.models import Laboratory


class UserFactory(factory.django.DjangoModelFactory):
    """Factory for Django User model"""

    class Meta:
        model = User

    username = factory.Sequence(lambda n: f"user{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@taskmanager.test")
    first_name = factory.Faker('first_name')
    last_name = factory.Faker('last_name')
    is_active = True
    is_staff = False
    date_joined = factory.LazyFunction(timezone.now)


class LaboratoryFactory(factory.django.DjangoModelFactory):
    """Factory for Laboratory model"""

    class Meta:
        model = Laboratory

    title = factory.Faker('sentence')
    description = factory.Faker('paragraph')
    deadline = factory.Faker('future_date')
    done = False
    user = factory.SubFactory(UserFactory)


class CompletedLaboratoryFactory(LaboratoryFactory):
    """Factory for laboratories already marked as done"""

    done = True
