from datetime import date, time
import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse
from apps.calendar_app.models import Event, ContactEvent
from apps.contacts.models import Contact

pytestmark = pytest.mark.django_db

PNG = b'\x89PNG\r\n\x1a\n' + b'\x00' * 32


def _contact(user, first, last, **fields):
    return Contact.objects.create(user=user, first_name=first, last_name=last, **fields)


class TestList:

    def test_search_by_full_name_email_and_phone(self, auth_client, user):
        _contact(user, 'Mary', 'Jones', email='mary@example.com')
        _contact(user, 'Peter', 'Smith', phone='555-0100')
        _contact(user, 'Ann', 'Young')

        def names(**params):
            response = auth_client.get(reverse('contact_list'), params)
            return [c.first_name for c in response.context['contacts']]

        assert names(search='mary jo') == ['Mary']
        assert names(search='EXAMPLE.COM') == ['Mary']
        assert names(search='0100') == ['Peter']
        assert names() == ['Mary', 'Peter', 'Ann']

    def test_favorites_filter(self, auth_client, user):
        _contact(user, 'Mary', 'Jones', is_favorite=True)
        _contact(user, 'Peter', 'Smith')

        response = auth_client.get(reverse('contact_list'), {'filter': 'favorites'})
        assert [c.first_name for c in response.context['contacts']] == ['Mary']

    def test_recent_is_first_ten(self, auth_client, user):
        for i in range(12):
            _contact(user, f'P{i}', f'L{i:02d}')
        response = auth_client.get(reverse('contact_list'), {'filter': 'recent'})
        assert len(response.context['contacts']) == 10

    def test_event_count_and_isolation(self, auth_client, user, other_user):
        mary = _contact(user, 'Mary', 'Jones')
        _contact(other_user, 'Hidden', 'Person')
        event = Event.objects.create(user=user, title='Lunch', event_date=date(2024, 1, 1), start_time=time(12))
        ContactEvent.objects.create(contact=mary, event=event)

        contacts = list(auth_client.get(reverse('contact_list')).context['contacts'])
        assert [(c.first_name, c.event_count) for c in contacts] == [('Mary', 1)]


class TestWrite:

    def test_create_with_photo(self, auth_client, user, media_root):
        photo = SimpleUploadedFile('me.png', PNG, content_type='image/png')
        response = auth_client.post(reverse('contact_create'), {
            'first_name': 'Mary', 'last_name': 'Jones', 'photo': photo,
        })

        assert response.status_code == 302
        contact = Contact.objects.get(user=user)
        assert contact.photo.name.startswith('contacts/contact-')
        assert contact.photo.name.endswith('.png')
        assert (media_root / contact.photo.name).exists()

    def test_rejects_non_image(self, auth_client, user, media_root):
        upload = SimpleUploadedFile('notes.txt', b'hello', content_type='text/plain')
        auth_client.post(reverse('contact_create'), {'first_name': 'A', 'last_name': 'B', 'photo': upload})
        assert not Contact.objects.exists()

    def test_rejects_large_image(self, auth_client, user, media_root, settings):
        settings.UPLOAD_MAX_BYTES = 10
        upload = SimpleUploadedFile('big.png', PNG, content_type='image/png')
        auth_client.post(reverse('contact_create'), {'first_name': 'A', 'last_name': 'B', 'photo': upload})
        assert not Contact.objects.exists()

    def test_update_replaces_photo(self, auth_client, user, media_root):
        auth_client.post(reverse('contact_create'), {
            'first_name': 'Mary', 'last_name': 'Jones',
            'photo': SimpleUploadedFile('a.png', PNG, content_type='image/png'),
        })
        contact = Contact.objects.get(user=user)
        old_path = media_root / contact.photo.name

        auth_client.post(reverse('contact_update', args=[contact.id]), {
            'first_name': 'Mary', 'last_name': 'Smith',
            'photo': SimpleUploadedFile('b.gif', b'GIF89a' + b'\x00' * 10, content_type='image/gif'),
        })

        contact.refresh_from_db()
        assert contact.last_name == 'Smith'
        assert contact.photo.name.endswith('.gif')
        assert not old_path.exists()

    def test_delete_removes_photo_and_links(self, auth_client, user, media_root):
        auth_client.post(reverse('contact_create'), {
            'first_name': 'Mary', 'last_name': 'Jones',
            'photo': SimpleUploadedFile('a.png', PNG, content_type='image/png'),
        })
        contact = Contact.objects.get(user=user)
        event = Event.objects.create(user=user, title='E', event_date=date(2024, 1, 1), start_time=time(9))
        ContactEvent.objects.create(contact=contact, event=event)
        path = media_root / contact.photo.name

        auth_client.post(reverse('contact_delete', args=[contact.id]))

        assert not Contact.objects.exists()
        assert not ContactEvent.objects.exists()
        assert Event.objects.filter(pk=event.id).exists()
        assert not path.exists()

    def test_favorite_toggle(self, auth_client, user, other_user):
        contact = _contact(user, 'Mary', 'Jones')
        url = reverse('contact_favorite', args=[contact.id])

        assert auth_client.post(url).json() == {'success': True}
        contact.refresh_from_db()
        assert contact.is_favorite is True

        auth_client.post(url)
        contact.refresh_from_db()
        assert contact.is_favorite is False

        foreign = _contact(other_user, 'X', 'Y')
        assert auth_client.post(reverse('contact_favorite', args=[foreign.id])).status_code == 404


class TestDetail:

    def test_events_newest_first(self, auth_client, user):
        contact = _contact(user, 'Mary', 'Jones')
        for day in (1, 20, 10):
            event = Event.objects.create(user=user, title=f'E{day}', event_date=date(2024, 3, day), start_time=time(9))
            ContactEvent.objects.create(contact=contact, event=event)

        data = auth_client.get(reverse('contact_detail', args=[contact.id])).json()

        assert data['contact']['contact_id'] == contact.id
        assert [e['title'] for e in data['events']] == ['E20', 'E10', 'E1']
