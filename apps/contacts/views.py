import logging
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.db.models import Case, Count, Value, When, BooleanField
from django.http import JsonResponse
from django.shortcuts import render, redirect
from django.views.decorators.http import require_GET, require_POST
from apps.core.uploads import delete_stored_file
from apps.calendar_app.models import Event
from .filters import ContactFilter
from .forms import ContactForm
from .models import Contact

logger = logging.getLogger(__name__)


def _form_error(form):
    # First validation message, shown as a flash message
    for errors in form.errors.values():
        return errors[0]
    return "Invalid form"


@login_required
@require_GET
def contact_list_view(request):
    qs = Contact.objects.filter(user=request.user).annotate(
        event_count=Count('event_links')
    ).order_by('last_name', 'first_name')

    f = ContactFilter(request.GET, queryset=qs)

    return render(request, 'contacts/contact_list.html', {
        'page_title': 'Contacts - Cal-Endure to the End',
        'current_page': 'contacts',
        'contacts': f.qs,
        'filter': f,
        'search': request.GET.get('search', ''),
        'active_filter': request.GET.get('filter') or 'all',
    })


@login_required
@require_POST
def contact_create_view(request):
    form = ContactForm(request.POST, request.FILES)
    if not form.is_valid():
        messages.error(request, _form_error(form))
        return redirect('contact_list')

    try:
        contact = form.save(commit=False)
        contact.user = request.user
        contact.save()
    except DatabaseError:
        logger.exception("Create contact error")
        messages.error(request, "Error creating contact")
        return redirect('contact_list')

    messages.success(request, "Contact created successfully")
    return redirect('contact_list')


@login_required
@require_GET
def contact_detail_view(request, pk):
    contact = Contact.objects.filter(pk=pk, user=request.user).first()
    if contact is None:
        messages.error(request, "Contact not found")
        return redirect('contact_list')

    events = Event.objects.filter(
        user=request.user, contact_links__contact=contact
    ).order_by('-event_date', '-start_time')

    return JsonResponse({
        'contact': contact.as_dict(),
        'events': [e.as_dict() for e in events],
    })


@login_required
@require_POST
def contact_update_view(request, pk):
    contact = Contact.objects.filter(pk=pk, user=request.user).first()
    if contact is None:
        messages.error(request, "Contact not found")
        return redirect('contact_list')

    old_photo = contact.photo.name
    form = ContactForm(request.POST, request.FILES, instance=contact)
    if not form.is_valid():
        messages.error(request, _form_error(form))
        return redirect('contact_list')

    try:
        contact = form.save()
    except DatabaseError:
        logger.exception("Update contact error")
        messages.error(request, "Error updating contact")
        return redirect('contact_list')

    # A new photo replaces the old file
    if old_photo != contact.photo.name:
        delete_stored_file(contact.photo.storage, old_photo)

    messages.success(request, "Contact updated successfully")
    return redirect('contact_list')


@login_required
@require_POST
def contact_favorite_view(request, pk):
    updated = Contact.objects.filter(pk=pk, user=request.user).update(
        is_favorite=Case(
            When(is_favorite=True, then=Value(False)),
            default=Value(True),
            output_field=BooleanField(),
        )
    )
    if not updated:
        return JsonResponse({'success': False, 'error': 'Contact not found'}, status=404)
    return JsonResponse({'success': True})


@login_required
@require_POST
def contact_delete_view(request, pk):
    contact = Contact.objects.filter(pk=pk, user=request.user).first()
    if contact is None:
        messages.error(request, "Contact not found")
        return redirect('contact_list')

    photo = contact.photo.name
    storage = contact.photo.storage

    try:
        # contact_events rows go with it (cascade)
        contact.delete()
    except DatabaseError:
        logger.exception("Delete contact error")
        messages.error(request, "Error deleting contact")
        return redirect('contact_list')

    delete_stored_file(storage, photo)

    messages.success(request, "Contact deleted successfully")
    return redirect('contact_list')
