# apps/core/views.py
import logging
from django.conf import settings
from django.contrib import messages
from django.contrib.auth import authenticate, get_user_model, login, logout, update_session_auth_hash
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError, transaction
from django.shortcuts import render, redirect
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.utils import timezone
from django.views.decorators.http import require_GET, require_POST, require_http_methods
from apps.goals.models import Goal
from .decorators import guest_required
from .forms import LoginForm, SignupForm, ProfileUpdateForm, PasswordChangeForm, ProfilePhotoForm
from .models import UserProfile
from .services import DashboardService
from .uploads import delete_stored_file

logger = logging.getLogger(__name__)

User = get_user_model()


def _form_error(form):
    for errors in form.errors.values():
        return errors[0]
    return "Invalid form"


def _profile(user):
    # Users created before the signal (e.g. fixtures, createsuperuser on an old DB)
    profile, _ = UserProfile.objects.get_or_create(user=user)
    return profile


@require_GET
def landing_view(request):
    return render(request, 'landing.html', {
        'page_title': 'Cal-Endure to the End - PMG Calendar for Returned Missionaries',
        'deleted': request.GET.get('deleted') == 'true',
    })


@guest_required
@require_http_methods(["GET", "POST"])
def login_view(request):
    if request.method == 'GET':
        next_url = request.GET.get('next', '')
        if next_url:
            # Sent here by login_required
            messages.error(request, "Please log in to access this page")
        return render(request, 'login.html', {
            'page_title': 'Login - Cal-Endure to the End',
            'form': LoginForm(),
            'signup_form': SignupForm(),
            'next': next_url,
        })

    form = LoginForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Invalid email or password")
        return redirect('login')

    # Accounts are looked up by e-mail, Django authenticates by username
    account = User.objects.filter(email__iexact=form.cleaned_data['email']).first()
    user = None
    if account is not None:
        user = authenticate(request, username=account.get_username(), password=form.cleaned_data['password'])

    if user is None:
        messages.error(request, "Invalid email or password")
        return redirect('login')

    login(request, user)
    if form.cleaned_data['remember']:
        request.session.set_expiry(settings.REMEMBER_ME_SESSION_AGE)
    else:
        request.session.set_expiry(settings.SESSION_COOKIE_AGE)

    messages.success(request, "Welcome back!")
    next_url = request.POST.get('next', '')
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()},
                                                     require_https=request.is_secure()):
        return redirect(next_url)
    return redirect('dashboard')


@guest_required
@require_POST
def signup_view(request):
    signup_url = reverse('login') + '#signup'

    form = SignupForm(request.POST)
    if not form.is_valid():
        messages.error(request, _form_error(form))
        return redirect(signup_url)

    data = form.cleaned_data
    try:
        with transaction.atomic():
            user = User.objects.create_user(
                username=data['username'],
                email=data['email'],
                password=data['password'],
                first_name=data['first_name'],
                last_name=data['last_name'],
            )
            profile = _profile(user)
            profile.mission = data['mission'] or None
            profile.save()
    except DatabaseError:
        logger.exception("Signup error")
        messages.error(request, "An error occurred during signup")
        return redirect(signup_url)

    login(request, user)
    messages.success(request, "Account created successfully! Welcome!")
    return redirect('dashboard')


@require_http_methods(["GET", "POST"])
def logout_view(request):
    logout(request)
    return redirect('landing')


@login_required
@require_GET
def profile_view(request):
    return render(request, 'profile.html', {
        'page_title': 'Profile - Cal-Endure to the End',
        'current_page': 'profile',
        'profile': _profile(request.user),
    })


@login_required
@require_POST
def profile_photo_view(request):
    form = ProfilePhotoForm(request.POST, request.FILES)
    if 'profile_photo' not in request.FILES:
        messages.error(request, "No photo uploaded")
        return redirect('dashboard')
    if not form.is_valid():
        messages.error(request, _form_error(form))
        return redirect('profile')

    profile = _profile(request.user)
    old_photo = profile.profile_photo.name
    storage = profile.profile_photo.storage

    try:
        profile.profile_photo = form.cleaned_data['profile_photo']
        profile.save()
    except DatabaseError:
        logger.exception("Update profile photo error")
        messages.error(request, "Error updating profile photo")
        return redirect('profile')

    if old_photo != profile.profile_photo.name:
        delete_stored_file(storage, old_photo)

    messages.success(request, "Profile photo updated successfully")
    return redirect('profile')


@login_required
@require_POST
def profile_update_view(request):
    form = ProfileUpdateForm(request.POST, user=request.user)
    if not form.is_valid():
        messages.error(request, _form_error(form))
        return redirect('profile')

    data = form.cleaned_data
    user = request.user
    try:
        with transaction.atomic():
            user.first_name = data['first_name']
            user.last_name = data['last_name']
            user.email = data['email']
            user.username = data['username']
            user.save()

            profile = _profile(user)
            profile.mission = data['mission'] or None
            profile.save()
    except DatabaseError:
        logger.exception("Update profile error")
        messages.error(request, "Error updating profile")
        return redirect('profile')

    messages.success(request, "Profile updated successfully")
    return redirect('profile')


@login_required
@require_POST
def profile_password_view(request):
    form = PasswordChangeForm(request.POST, user=request.user)
    if not form.is_valid():
        messages.error(request, _form_error(form))
        return redirect('profile')

    user = request.user
    try:
        user.set_password(form.cleaned_data['new_password'])
        user.save()
    except DatabaseError:
        logger.exception("Change password error")
        messages.error(request, "Error changing password")
        return redirect('profile')

    # Stay logged in after the hash changes
    update_session_auth_hash(request, user)
    messages.success(request, "Password changed successfully")
    return redirect('profile')


@login_required
@require_POST
def profile_delete_view(request):
    user = request.user
    profile = _profile(user)
    photo, storage = profile.profile_photo.name, profile.profile_photo.storage

    try:
        # Goals, events, contacts and the profile go with the user (cascade)
        user.delete()
    except DatabaseError:
        logger.exception("Delete account error")
        messages.error(request, "Error deleting account")
        return redirect('profile')

    delete_stored_file(storage, photo)
    logout(request)
    return redirect(reverse('landing') + '?deleted=true')


@login_required
@require_GET
def dashboard_view(request):
    try:
        data = DashboardService(request.user).build(timezone.localdate())
    except DatabaseError:
        logger.exception("Dashboard error")
        messages.error(request, "Error loading dashboard")
        return redirect('landing')

    data.update({
        'page_title': 'Goals Dashboard - Cal-Endure to the End',
        'current_page': 'dashboard',
        'categories': Goal.Category.choices,
        'goal_types': Goal.GoalType.choices,
        'patterns': Goal.Pattern.choices,
    })
    return render(request, 'dashboard.html', data)


def page_not_found_view(request, exception=None):
    return render(request, 'error.html', {
        'page_title': '404 - Page Not Found',
        'error': '404',
        'message': 'Page not found',
    }, status=404)


def server_error_view(request):
    return render(request, 'error.html', {
        'page_title': 'Error',
        'error': '500',
        'message': 'Something went wrong!',
    }, status=500)
