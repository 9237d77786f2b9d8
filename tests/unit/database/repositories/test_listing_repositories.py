#!/usr/bin/env python3
"""
Repository tests for apartment and room listing queries (SQLite in-memory).
"""

import unittest

from database.repositories import (
    ApartmentRepository,
    ApartmentFilters,
    RoomRepository,
    RoomFilters,
    ApplicationRepository,
    MatchRepository,
)
from tests import make_session_factory, add_user, add_apartment, add_room, count_matches


class TestApartmentSearch(unittest.TestCase):

    def setUp(self):
        self.db = make_session_factory()()
        self.owner = add_user(self.db, "owner@example.com")
        self.repo = ApartmentRepository(self.db)

    def tearDown(self):
        self.db.close()

    def _ids(self, filters, offset=0, limit=100):
        return [a.id for a, _ in self.repo.search_available(filters, offset, limit)]

    def test_only_available_newest_first(self):
        old = add_apartment(self.db, self.owner, seq=1)
        new = add_apartment(self.db, self.owner, seq=2)
        add_apartment(self.db, self.owner, seq=3, status="rented")

        self.assertEqual(self._ids(ApartmentFilters()), [new.id, old.id])

    def test_rows_carry_owner(self):
        add_apartment(self.db, self.owner, seq=1)
        (apartment, owner), = self.repo.search_available(ApartmentFilters(), 0, 10)
        self.assertEqual(owner.email, "owner@example.com")
        self.assertEqual(apartment.owner_id, owner.id)

    def test_city_is_case_insensitive_substring(self):
        match = add_apartment(self.db, self.owner, seq=1, city="San Francisco")
        add_apartment(self.db, self.owner, seq=2, city="Oakland")

        self.assertEqual(self._ids(ApartmentFilters(city="francisco")), [match.id])
        self.assertEqual(self._ids(ApartmentFilters(city="%")), [])

    def test_filters_are_conjunctive(self):
        hit = add_apartment(
            self.db, self.owner, seq=1, monthly_rent=1200, total_rooms=3,
            furnished=True, pet_friendly=True, parking_available=True
        )
        add_apartment(self.db, self.owner, seq=2, monthly_rent=1200, total_rooms=3, furnished=True)
        add_apartment(self.db, self.owner, seq=3, monthly_rent=2500, total_rooms=3,
                      furnished=True, pet_friendly=True, parking_available=True)
        add_apartment(self.db, self.owner, seq=4, monthly_rent=1200, total_rooms=1,
                      furnished=True, pet_friendly=True, parking_available=True)

        filters = ApartmentFilters(
            min_price=1000, max_price=1500, min_rooms=2,
            furnished=True, pet_friendly=True, parking=True
        )
        self.assertEqual(self._ids(filters), [hit.id])

    def test_false_flags_do_not_constrain(self):
        add_apartment(self.db, self.owner, seq=1, furnished=True)
        add_apartment(self.db, self.owner, seq=2, furnished=False)
        self.assertEqual(len(self._ids(ApartmentFilters(furnished=False))), 2)

    def test_pagination_window(self):
        apartments = [add_apartment(self.db, self.owner, seq=i) for i in range(1, 26)]
        newest_first = [a.id for a in reversed(apartments)]

        self.assertEqual(self._ids(ApartmentFilters(), offset=10, limit=10), newest_first[10:20])
        self.assertEqual(self._ids(ApartmentFilters(), offset=20, limit=10), newest_first[20:])

    def test_update_owned_requires_owner(self):
        other = add_user(self.db, "other@example.com")
        apartment = add_apartment(self.db, self.owner, seq=1)

        self.assertEqual(self.repo.update_owned(apartment.id, other.id, {"title": "Hijacked"}), 0)
        self.assertEqual(self.repo.update_owned(apartment.id, self.owner.id, {"title": "Renamed"}), 1)
        self.db.commit()
        self.assertEqual(self.repo.get_with_owner(apartment.id)[0].title, "Renamed")

    def test_get_available_by_ids_skips_unavailable(self):
        a = add_apartment(self.db, self.owner, seq=1)
        b = add_apartment(self.db, self.owner, seq=2, status="unavailable")
        rows = self.repo.get_available_by_ids([a.id, b.id, 999])
        self.assertEqual([apartment.id for apartment, _ in rows], [a.id])


class TestRoomSearch(unittest.TestCase):

    def setUp(self):
        self.db = make_session_factory()()
        self.owner = add_user(self.db, "owner@example.com")
        self.repo = RoomRepository(self.db)

    def tearDown(self):
        self.db.close()

    def _ids(self, filters):
        return [room.id for room, _, _ in self.repo.search_available(filters, 0, 100)]

    def test_requires_room_and_apartment_available(self):
        open_apartment = add_apartment(self.db, self.owner, seq=1)
        closed_apartment = add_apartment(self.db, self.owner, seq=2, status="unavailable")
        visible = add_room(self.db, open_apartment, seq=1)
        add_room(self.db, open_apartment, seq=2, status="rented")
        add_room(self.db, closed_apartment, seq=3)

        self.assertEqual(self._ids(RoomFilters()), [visible.id])

    def test_room_filters(self):
        apartment = add_apartment(self.db, self.owner, seq=1, city="Boston")
        studio = add_room(self.db, apartment, seq=1, room_type="studio", private_bathroom=True,
                          furnished=True, monthly_rent=900)
        add_room(self.db, apartment, seq=2, room_type="studio", monthly_rent=900)
        add_room(self.db, apartment, seq=3, room_type="bedroom", private_bathroom=True,
                 furnished=True, monthly_rent=900)

        filters = RoomFilters(city="bos", max_price=1000, room_type="studio",
                              furnished=True, private_bathroom=True)
        self.assertEqual(self._ids(filters), [studio.id])

    def test_owner_lookup_goes_through_apartment(self):
        apartment = add_apartment(self.db, self.owner, seq=1)
        room = add_room(self.db, apartment, seq=1)
        self.assertEqual(self.repo.get_owner_id(room.id), self.owner.id)
        self.assertIsNone(self.repo.get_owner_id(12345))


class TestApplicationAndMatchRepositories(unittest.TestCase):

    def setUp(self):
        self.db = make_session_factory()()
        self.owner = add_user(self.db, "owner@example.com")
        self.applicant = add_user(self.db, "applicant@example.com")
        self.room = add_room(self.db, add_apartment(self.db, self.owner, seq=1), seq=1)

    def tearDown(self):
        self.db.close()

    def test_update_status_only_for_owner(self):
        repo = ApplicationRepository(self.db)
        application = repo.create_application(self.room.id, self.applicant.id, "hi")
        self.db.commit()

        self.assertEqual(repo.update_status_if_owner(application.id, self.applicant.id, "approved"), 0)
        self.assertEqual(repo.update_status_if_owner(application.id, self.owner.id, "approved"), 1)

    def test_pair_key_is_order_independent(self):
        repo = MatchRepository(self.db)
        repo.create_match(self.applicant.id, self.owner.id, 0.7)
        self.db.commit()

        self.assertIsNotNone(repo.get_for_pair(self.owner.id, self.applicant.id))
        self.assertEqual(count_matches(self.db, self.owner.id, self.applicant.id), 1)


if __name__ == '__main__':
    unittest.main()
