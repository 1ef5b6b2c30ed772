"""
Filtering and sorting tests for the v2 laboratories list
"""
from datetime import date, timedelta

import pytest
from django.http import QueryDict
from rest_framework import status

from apps.laboratories.filters import LaboratoryFilter, parse_sort, unwrap_query_params
from apps.laboratories.models import Laboratory

from .factories import CompletedLaboratoryFactory, LaboratoryFactory
from .utils import LABORATORIES_URL


def titles(response):
    return [item['attributes']['title'] for item in response.data['data']]


@pytest.mark.unit
class TestParseSort:

    def test_single_field_ascending(self):
        assert parse_sort('title ASC') == ['title']

    def test_direction_defaults_to_ascending(self):
        assert parse_sort('deadline') == ['deadline']

    def test_descending_and_multiple_fields(self):
        assert parse_sort('deadline desc, title asc') == ['-deadline', 'title']

    def test_unknown_field_and_direction_are_skipped(self):
        assert parse_sort('password asc, title sideways, done desc') == ['-done']

    def test_empty_value(self):
        assert parse_sort(' , ') == []


@pytest.mark.unit
class TestUnwrapQueryParams:

    def test_wrapped_params_are_unwrapped(self):
        data = unwrap_query_params(QueryDict('q[title_cont]=note&q[s]=title+asc'))

        assert data['title_cont'] == 'note'
        assert data['s'] == 'title asc'

    def test_bare_params_are_kept(self):
        data = unwrap_query_params(QueryDict('title_cont=note'))

        assert data['title_cont'] == 'note'

    def test_wrapped_params_take_precedence(self):
        data = unwrap_query_params(QueryDict('q[title_cont]=wrapped&title_cont=bare'))

        assert data['title_cont'] == 'wrapped'


@pytest.mark.django_db
class TestLaboratoryFilter:

    def test_unknown_predicates_are_ignored(self, user):
        LaboratoryFactory.create_batch(2, user=user)

        filterset = LaboratoryFilter(
            data={'title_matches_regex': '.*'},
            queryset=Laboratory.objects.owned_by(user)
        )

        assert filterset.is_valid()
        assert filterset.qs.count() == 2

    def test_invalid_date_is_reported(self, user):
        filterset = LaboratoryFilter(
            data={'deadline_lt': 'tomorrow-ish'},
            queryset=Laboratory.objects.owned_by(user)
        )

        assert not filterset.is_valid()
        assert 'deadline_lt' in filterset.errors


@pytest.mark.api
@pytest.mark.django_db
class TestLaboratoryListFiltering:

    def test_bare_params(self, v2_client, user):
        LaboratoryFactory(title='Buy a new notebook', user=user)
        LaboratoryFactory(title='Fix the door', user=user)

        response = v2_client.get(f'{LABORATORIES_URL}?title_cont=NOTE')

        assert response.status_code == status.HTTP_200_OK
        assert titles(response) == ['Buy a new notebook']

    def test_sort_descending(self, v2_client, user):
        for title in ['Bravo', 'Alpha', 'Charlie']:
            LaboratoryFactory(title=title, user=user)

        response = v2_client.get(f'{LABORATORIES_URL}?q[s]=title+desc')

        assert titles(response) == ['Charlie', 'Bravo', 'Alpha']

    def test_unknown_sort_field_keeps_default_order(self, v2_client, user):
        first = LaboratoryFactory(title='Zulu', user=user)
        second = LaboratoryFactory(title='Alpha', user=user)

        response = v2_client.get(f'{LABORATORIES_URL}?q[s]=user_id+asc')

        assert titles(response) == [first.title, second.title]

    def test_done_filter(self, v2_client, user):
        LaboratoryFactory(title='Pending', user=user)
        CompletedLaboratoryFactory(title='Finished', user=user)

        response = v2_client.get(f'{LABORATORIES_URL}?q[done_eq]=true')

        assert titles(response) == ['Finished']

    def test_deadline_range(self, v2_client, user):
        today = date.today()
        LaboratoryFactory(title='Soon', deadline=today + timedelta(days=1), user=user)
        LaboratoryFactory(title='Later', deadline=today + timedelta(days=30), user=user)
        LaboratoryFactory(title='No deadline', deadline=None, user=user)

        response = v2_client.get(
            f'{LABORATORIES_URL}?q[deadline_lteq]={(today + timedelta(days=7)).isoformat()}'
        )

        assert titles(response) == ['Soon']

    def test_description_filter(self, v2_client, user):
        LaboratoryFactory(title='With keyword', description='Calibrate the microscope', user=user)
        LaboratoryFactory(title='Without keyword', description='Order reagents', user=user)

        response = v2_client.get(f'{LABORATORIES_URL}?q[description_cont]=microscope')

        assert titles(response) == ['With keyword']

    def test_invalid_filter_value(self, v2_client, user):
        response = v2_client.get(f'{LABORATORIES_URL}?q[deadline_gt]=not-a-date')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'deadline_gt' in response.data

    def test_filters_do_not_apply_to_show(self, v2_client, user):
        laboratory = LaboratoryFactory(title='Fix the door', user=user)

        response = v2_client.get(f'{LABORATORIES_URL}{laboratory.id}/?q[title_cont]=note')

        assert response.status_code == status.HTTP_200_OK
