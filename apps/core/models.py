# apps/core/models.py
from django.db import models
from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver
from .uploads import profile_photo_path


class UserProfile(models.Model):
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='profile')

    # Mission served (free text, optional)
    mission = models.CharField(max_length=200, blank=True, null=True)
    profile_photo = models.FileField(upload_to=profile_photo_path, blank=True)

    def __str__(self):
        return f"Profile of {self.user.username}"


# Profile is created together with the user
@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_user_profile(sender, instance, created, **kwargs):
    if created:
        UserProfile.objects.get_or_create(user=instance)
