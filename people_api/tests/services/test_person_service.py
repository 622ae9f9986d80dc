import pytest
from sqlmodel import Session, select

from people_api.application.dtos.person_dtos import PersonDto
from people_api.application.services.person_service import PersonService
from people_api.core.db import engine
from people_api.core.seed import DEMO_PEOPLE, seed_demo_data
from people_api.core.unit_of_work import UnitOfWork
from people_api.domain.shared.exceptions import ConstraintViolationError
from people_api.infrastructure.database.models import Address, Person
from people_api.infrastructure.database.repositories import PersonRepository


class TestPersonService:
    def test_find_all_people_on_empty_store(self, db_session: Session):
        assert PersonService(db_session).find_all_people() == []

    def test_register_then_list(self, db_session: Session):
        service = PersonService(db_session)
        service.register_person("Ahmet", ["ahmetFirstStreet"])
        db_session.commit()

        people = service.find_all_people()

        assert people == [
            PersonDto.model_validate(
                {"name": "Ahmet", "addresses": [{"street": "ahmetFirstStreet"}]}
            )
        ]

    def test_register_person_links_addresses(self, db_session: Session):
        person = PersonService(db_session).register_person(
            "Burak", ["firstStreet", "scStreet"]
        )

        assert person.id is not None
        assert [a.person_id for a in person.addresses] == [person.id, person.id]

    def test_register_duplicate_name_raises(self, db_session: Session):
        service = PersonService(db_session)
        service.register_person("Ahmet", [])
        db_session.commit()

        with pytest.raises(ConstraintViolationError):
            service.register_person("Ahmet", ["other"])


class TestUnitOfWork:
    def test_commits_person_and_addresses_together(self):
        with UnitOfWork() as uow:
            person = Person.create("Burak")
            person.add_address("firstStreet")
            person.add_address("scStreet")
            uow.people.save(person)

        with Session(engine) as session:
            assert len(session.exec(select(Person)).all()) == 1
            assert len(session.exec(select(Address)).all()) == 2

    def test_rolls_back_everything_on_error(self):
        with UnitOfWork() as uow:
            uow.people.save(Person.create("Ahmet"))

        with pytest.raises(ConstraintViolationError):
            with UnitOfWork() as uow:
                person = Person.create("Burak")
                person.add_address("firstStreet")
                uow.people.save(person)
                uow.people.save(Person.create("Ahmet"))

        with Session(engine) as session:
            names = [p.name for p in session.exec(select(Person)).all()]
            assert names == ["Ahmet"]
            assert session.exec(select(Address)).all() == []

    def test_address_repository_shares_the_transaction(self):
        with UnitOfWork() as uow:
            person = Person.create("Burak")
            person.add_address("firstStreet")
            person.add_address("scStreet")
            uow.people.save(person)
            person_id = person.id
            first_id = person.addresses[0].id

        with UnitOfWork() as uow:
            assert uow.addresses.delete_by_id(first_id) is True
            remaining = uow.addresses.find_by_person_id(person_id)
            assert [a.street for a in remaining] == ["scStreet"]

        with Session(engine) as session:
            streets = [a.street for a in session.exec(select(Address)).all()]
            assert streets == ["scStreet"]

    def test_constraint_failure_at_commit_is_translated(self):
        with UnitOfWork() as uow:
            uow.people.save(Person.create("Ahmet"))

        with pytest.raises(ConstraintViolationError):
            with UnitOfWork() as uow:
                # added without a repository flush, so the commit hits the constraint
                uow.session.add(Person.create("Ahmet"))

        with Session(engine) as session:
            assert len(session.exec(select(Person)).all()) == 1

    def test_cannot_enter_twice(self):
        uow = UnitOfWork()
        with uow:
            with pytest.raises(RuntimeError):
                uow.__enter__()


class TestSeedDemoData:
    def test_seed_inserts_demo_people(self):
        assert seed_demo_data() == ["Ahmet", "Burak"]

        with Session(engine) as session:
            dtos = PersonService(session).find_all_people()

        by_name = {d.name: sorted(a.street for a in d.addresses) for d in dtos}
        assert by_name == DEMO_PEOPLE

    def test_seed_is_idempotent(self):
        seed_demo_data()

        assert seed_demo_data() == []
        with Session(engine) as session:
            assert len(session.exec(select(Person)).all()) == 2

    def test_seed_skips_person_inserted_by_another_worker(self, monkeypatch):
        with UnitOfWork() as uow:
            uow.people.save(Person.create("Ahmet"))
        # Every existence check misses, as when a concurrent worker commits
        # between the check and the insert
        monkeypatch.setattr(
            PersonRepository, "find_all_people", lambda self, name=None: []
        )

        created = seed_demo_data()

        assert created == ["Burak"]
        with Session(engine) as session:
            names = sorted(p.name for p in session.exec(select(Person)).all())
            streets = sorted(a.street for a in session.exec(select(Address)).all())
        assert names == ["Ahmet", "Burak"]
        assert streets == ["firstStreet", "scStreet"]
