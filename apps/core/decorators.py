# apps/core/decorators.py
from functools import wraps
from django.shortcuts import redirect


def guest_required(view_func):
    """Login/signup pages: authenticated users go straight to the dashboard."""
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if request.user.is_authenticated:
            return redirect('dashboard')
        return view_func(request, *args, **kwargs)
    return _wrapped
