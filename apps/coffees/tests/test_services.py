import pytest
import uuid

from apps.coffees.models import Coffee, ProcessingMethod
from apps.coffees.services import (
    create_coffee,
    update_coffee,
    delete_coffee,
    get_coffee_by_id,
    search_coffees,
    get_all_roasters,
    get_coffee_rating_summary,
    fetch_or_create_processing_method,
    get_processing_methods_sorted,
    seed_default_processing_methods,
    record_processing_method_use,
    CoffeeNotFoundError,
    InvalidCoffeeError,
)
from apps.notes.models import BrewingNote


@pytest.mark.django_db
class TestCoffeeManagement:

    def test_create_coffee(self):
        coffee = create_coffee(name='  Gesha  ', roaster='Onyx', processing='Washed')

        assert coffee.name == 'Gesha'
        assert coffee.roast_level == 'Medium'
        assert Coffee.objects.count() == 1

    def test_create_counts_processing_method(self):
        create_coffee(name='A', processing='Honey')
        create_coffee(name='B', processing='Honey')

        assert ProcessingMethod.objects.get(name='Honey').usage_count == 2

    def test_create_requires_name(self):
        with pytest.raises(InvalidCoffeeError):
            create_coffee(name='   ')

    def test_update_coffee(self, coffee):
        updated = update_coffee(coffee_id=coffee.id, data={'origin': 'Kenya'})
        assert updated.origin == 'Kenya'

    def test_update_blank_name(self, coffee):
        with pytest.raises(InvalidCoffeeError):
            update_coffee(coffee_id=coffee.id, data={'name': ''})

    def test_update_not_found(self):
        with pytest.raises(CoffeeNotFoundError):
            update_coffee(coffee_id=uuid.uuid4(), data={'origin': 'Kenya'})

    def test_delete_keeps_notes(self, coffee, rated_notes):
        delete_coffee(coffee_id=coffee.id)

        assert not Coffee.objects.exists()
        assert BrewingNote.objects.count() == 4
        assert BrewingNote.objects.first().coffee_name == 'Unknown Coffee'

    def test_delete_not_found(self):
        with pytest.raises(CoffeeNotFoundError):
            delete_coffee(coffee_id=uuid.uuid4())

    def test_get_by_id(self, coffee):
        assert get_coffee_by_id(coffee_id=coffee.id) == coffee


@pytest.mark.django_db
class TestCoffeeSearch:

    def test_search(self, coffee, coffee_light):
        assert list(search_coffees(search='ethiopia')) == [coffee_light]
        assert list(search_coffees(search='bottle')) == [coffee]

    def test_filter_by_roast_level(self, coffee, coffee_light):
        assert list(search_coffees(roast_level='Light')) == [coffee_light]

    def test_ordering_by_name(self, coffee, coffee_light):
        assert list(search_coffees(ordering='name')) == [coffee, coffee_light]

    def test_roasters(self, coffee, coffee_light):
        Coffee.objects.create(name='No roaster')
        assert get_all_roasters() == ['Blue Bottle Coffee', 'Square Mile']


@pytest.mark.django_db
class TestRatingSummary:

    def test_summary(self, coffee, rated_notes):
        summary = get_coffee_rating_summary(coffee_id=coffee.id)

        assert summary['brewing_notes_count'] == 4
        assert summary['rated_notes_count'] == 3
        assert summary['average_rating'] == 4.33
        assert summary['rating_distribution'] == {'1': 0, '2': 0, '3': 0, '4': 2, '5': 1}

    def test_summary_without_notes(self, coffee):
        summary = get_coffee_rating_summary(coffee_id=coffee.id)

        assert summary['average_rating'] == 0.0
        assert summary['rated_notes_count'] == 0

    def test_summary_not_found(self):
        with pytest.raises(CoffeeNotFoundError):
            get_coffee_rating_summary(coffee_id=uuid.uuid4())


@pytest.mark.django_db
class TestProcessingMethods:

    def test_fetch_or_create(self):
        first = fetch_or_create_processing_method(name='Anaerobic')
        second = fetch_or_create_processing_method(name='Anaerobic ')

        assert first.id == second.id
        assert first.usage_count == 0

    def test_seed_is_idempotent(self):
        assert seed_default_processing_methods() == len(ProcessingMethod.DEFAULT_METHODS)
        assert seed_default_processing_methods() == 0

    def test_sorted_by_usage_then_name(self):
        seed_default_processing_methods()
        record_processing_method_use(name='Natural')
        record_processing_method_use(name='Natural')
        record_processing_method_use(name='Washed')

        names = [m.name for m in get_processing_methods_sorted()]
        assert names[:3] == ['Natural', 'Washed', 'Anaerobic']
