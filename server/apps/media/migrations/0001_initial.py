import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('contenttypes', '0002_remove_content_type_name'),
    ]

    operations = [
        migrations.CreateModel(
            name='Media',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('disk', models.CharField(help_text='Alias of the storage in STORAGES', max_length=64)),
                ('directory', models.CharField(blank=True, default='', help_text='Directory relative to disk root', max_length=255)),
                ('filename', models.CharField(help_text='Filename without extension', max_length=255)),
                ('extension', models.CharField(help_text='Extension without leading dot', max_length=32)),
                ('mime_type', models.CharField(max_length=255)),
                ('aggregate_type', models.CharField(choices=[('image', 'Image'), ('vector', 'Vector image'), ('pdf', 'PDF'), ('video', 'Video'), ('audio', 'Audio'), ('archive', 'Archive'), ('document', 'Document'), ('spreadsheet', 'Spreadsheet'), ('other', 'Other')], db_index=True, default='other', max_length=32)),
                ('size', models.PositiveBigIntegerField(help_text='File size in bytes')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Media',
                'verbose_name_plural': 'Media',
                'ordering': ['disk', 'directory', 'filename'],
                'indexes': [models.Index(fields=['disk', 'directory'], name='media_disk_directory_idx')],
                'constraints': [models.UniqueConstraint(fields=('disk', 'directory', 'filename', 'extension'), name='media_disk_path_unique')],
            },
        ),
        migrations.CreateModel(
            name='Mediable',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('object_id', models.PositiveBigIntegerField()),
                ('tag', models.CharField(max_length=100)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('content_type', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='contenttypes.contenttype')),
                ('media', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attachments', to='media.media')),
            ],
            options={
                'verbose_name': 'Media attachment',
                'verbose_name_plural': 'Media attachments',
                'ordering': ['created_at', 'id'],
                'indexes': [models.Index(fields=['content_type', 'object_id', 'tag'], name='mediable_owner_tag_idx')],
                'constraints': [models.UniqueConstraint(fields=('media', 'content_type', 'object_id', 'tag'), name='mediable_unique_attachment')],
            },
        ),
    ]
