"""Business logic for attaching media to other models."""

import logging

from django.contrib.contenttypes.models import ContentType
from django.db import models
from django.db.models import QuerySet

from server.apps.media.models import Media, Mediable

logger = logging.getLogger(__name__)


def attach_media(owner: models.Model, media: Media, tag: str) -> Mediable:
    """Attach media to a model instance under a tag.

    Attaching the same media twice under the same tag is a no-op.

    Args:
        owner: Any saved model instance.
        media: Media to attach.
        tag: Role of the media for the owner, e.g. 'thumbnail'.

    Returns:
        The association record.
    """
    attachment, created = Mediable.objects.get_or_create(
        media=media,
        content_type=ContentType.objects.get_for_model(owner),
        object_id=owner.pk,
        tag=tag,
    )
    if created:
        logger.info(
            'Attached media %s to %s:%s as %s',
            media.pk,
            owner._meta.label,  # noqa: WPS437
            owner.pk,
            tag,
        )
    return attachment


def detach_media(
    owner: models.Model,
    media: Media,
    tag: str | None = None,
) -> int:
    """Detach media from a model instance.

    Args:
        owner: Model instance the media is attached to.
        media: Media to detach.
        tag: Only detach under this tag. Detach all tags if None.

    Returns:
        Number of associations removed.
    """
    attachments = _attachments_for(owner).filter(media=media)
    if tag is not None:
        attachments = attachments.filter(tag=tag)
    deleted_count, _ = attachments.delete()
    logger.info(
        'Detached media %s from %s:%s (%d associations)',
        media.pk,
        owner._meta.label,  # noqa: WPS437
        owner.pk,
        deleted_count,
    )
    return deleted_count


def get_media_for(
    owner: models.Model,
    tag: str | None = None,
) -> QuerySet[Media]:
    """List media attached to a model instance.

    Args:
        owner: Model instance.
        tag: Only media attached under this tag.

    Returns:
        QuerySet of attached Media.
    """
    attachments = _attachments_for(owner)
    if tag is not None:
        attachments = attachments.filter(tag=tag)
    return Media.objects.filter(
        id__in=attachments.values('media_id'),
    )


def get_models_for_media(
    media: Media,
    model_class: type[models.Model],
) -> QuerySet[models.Model]:
    """List instances of a model that a media file is attached to.

    Args:
        media: Media to look up.
        model_class: Model of the owners to return.

    Returns:
        QuerySet of owners of the given model.
    """
    object_ids = Mediable.objects.filter(
        media=media,
        content_type=ContentType.objects.get_for_model(model_class),
    ).values('object_id')
    return model_class._default_manager.filter(  # noqa: WPS437
        pk__in=object_ids,
    )


def _attachments_for(owner: models.Model) -> QuerySet[Mediable]:
    return Mediable.objects.filter(
        content_type=ContentType.objects.get_for_model(owner),
        object_id=owner.pk,
    )
