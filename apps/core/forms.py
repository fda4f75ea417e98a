from django import forms
from django.contrib.auth import get_user_model
from .uploads import validate_image_upload

User = get_user_model()

PASSWORD_MIN_LENGTH = 6


def _check_password_length(password):
    if len(password) < PASSWORD_MIN_LENGTH:
        raise forms.ValidationError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")


class LoginForm(forms.Form):
    email = forms.EmailField(widget=forms.EmailInput(attrs={'class': 'form-control'}))
    password = forms.CharField(widget=forms.PasswordInput(attrs={'class': 'form-control'}))
    remember = forms.BooleanField(required=False)


class SignupForm(forms.Form):
    first_name = forms.CharField(max_length=150)
    last_name = forms.CharField(max_length=150)
    email = forms.EmailField()
    username = forms.CharField(max_length=150)
    password = forms.CharField(widget=forms.PasswordInput)
    confirm_password = forms.CharField(widget=forms.PasswordInput, required=False)
    mission = forms.CharField(max_length=200, required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            field.error_messages['required'] = "All required fields must be filled"

    def clean(self):
        cleaned = super().clean()
        password = cleaned.get('password')
        if not password:
            return cleaned

        if password != cleaned.get('confirm_password'):
            raise forms.ValidationError("Passwords do not match")
        _check_password_length(password)

        email = cleaned.get('email')
        username = cleaned.get('username')
        if User.objects.filter(email__iexact=email).exists() or User.objects.filter(username=username).exists():
            raise forms.ValidationError("Email or username already exists")
        return cleaned


class ProfileUpdateForm(forms.Form):
    first_name = forms.CharField(max_length=150)
    last_name = forms.CharField(max_length=150)
    email = forms.EmailField()
    username = forms.CharField(max_length=150)
    mission = forms.CharField(max_length=200, required=False)

    def __init__(self, *args, user=None, **kwargs):
        self.user = user
        super().__init__(*args, **kwargs)

    def clean_email(self):
        email = self.cleaned_data['email']
        if User.objects.filter(email__iexact=email).exclude(pk=self.user.pk).exists():
            raise forms.ValidationError("Email already in use by another account")
        return email

    def clean_username(self):
        username = self.cleaned_data['username']
        if User.objects.filter(username=username).exclude(pk=self.user.pk).exists():
            raise forms.ValidationError("Username already in use by another account")
        return username


class PasswordChangeForm(forms.Form):
    current_password = forms.CharField(widget=forms.PasswordInput)
    new_password = forms.CharField(widget=forms.PasswordInput)
    confirm_password = forms.CharField(widget=forms.PasswordInput, required=False)

    def __init__(self, *args, user=None, **kwargs):
        self.user = user
        super().__init__(*args, **kwargs)

    def clean(self):
        cleaned = super().clean()
        new_password = cleaned.get('new_password')
        if not new_password:
            return cleaned

        if new_password != cleaned.get('confirm_password'):
            raise forms.ValidationError("New passwords do not match")
        _check_password_length(new_password)

        if not self.user.check_password(cleaned.get('current_password') or ''):
            raise forms.ValidationError("Current password is incorrect")
        return cleaned


class ProfilePhotoForm(forms.Form):
    profile_photo = forms.FileField(error_messages={'required': "No photo uploaded"})

    def clean_profile_photo(self):
        return validate_image_upload(self.cleaned_data['profile_photo'])
