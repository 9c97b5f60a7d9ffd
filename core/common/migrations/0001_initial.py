# Generated migration for the meetings administration models

import uuid

import django.core.serializers.json
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import core.common.models.organization


def history_fields():
    return [
        ('id', models.UUIDField(default=uuid.uuid4, help_text='UUID primary key', primary_key=True, serialize=False, verbose_name='id')),
        ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='creation date')),
        ('created_by', models.CharField(blank=True, help_text='the Id of the account user who added this object.', max_length=64, null=True, verbose_name='created by')),
        ('last_modified_at', models.DateTimeField(auto_now=True, verbose_name='last modified date')),
        ('last_modified_by', models.CharField(blank=True, help_text='the Id of the account user who last modified this object.', max_length=64, null=True, verbose_name='last modified by')),
    ]


def organization_field(related_name):
    return (
        'organization',
        models.ForeignKey(
            help_text='The organization this object belongs to',
            on_delete=django.db.models.deletion.CASCADE,
            related_name=related_name,
            related_query_name=related_name[:-1],
            to='common.organization',
            verbose_name='organization',
        ),
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Organization',
            fields=history_fields() + [
                ('name', models.CharField(help_text='Name of the organization', max_length=255, verbose_name='organization name')),
                ('host', models.CharField(help_text='Host name the organization is served from', max_length=255, unique=True, verbose_name='host')),
                ('available_locales', models.JSONField(default=core.common.models.organization.default_available_locales, help_text='Language codes content can be written in', verbose_name='available locales')),
                ('default_locale', models.CharField(default='en', help_text='Language code required on every translatable field', max_length=10, verbose_name='default locale')),
                ('is_active', models.BooleanField(default=True, help_text='Whether this organization is active in the system', verbose_name='is active')),
            ],
            options={
                'verbose_name': 'organization',
                'verbose_name_plural': 'organizations',
                'ordering': ['name'],
                'default_permissions': [],
                'indexes': [models.Index(fields=['name'], name='organization_name_idx')],
            },
        ),
        migrations.CreateModel(
            name='ParticipatorySpace',
            fields=history_fields() + [
                ('slug', models.SlugField(help_text='Slug used in public URLs', max_length=255, verbose_name='slug')),
                ('title', models.JSONField(default=dict, help_text='Translated title, keyed by language code', verbose_name='title')),
                organization_field('participatoryspaces'),
            ],
            options={
                'verbose_name': 'participatory space',
                'verbose_name_plural': 'participatory spaces',
                'ordering': ['slug'],
                'default_permissions': [],
                'constraints': [models.UniqueConstraint(fields=('organization', 'slug'), name='unique_space_slug_per_organization')],
            },
        ),
        migrations.CreateModel(
            name='Component',
            fields=history_fields() + [
                ('manifest_name', models.CharField(help_text='Kind of component, e.g. meetings', max_length=50, verbose_name='manifest name')),
                ('name', models.JSONField(default=dict, help_text='Translated name, keyed by language code', verbose_name='name')),
                ('published', models.BooleanField(default=False, verbose_name='published')),
                ('participatory_space', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='components', to='common.participatoryspace', verbose_name='participatory space')),
            ],
            options={
                'verbose_name': 'component',
                'verbose_name_plural': 'components',
                'default_permissions': [],
                'indexes': [models.Index(fields=['manifest_name'], name='component_manifest_idx')],
            },
        ),
        migrations.CreateModel(
            name='Scope',
            fields=history_fields() + [
                ('name', models.JSONField(default=dict, help_text='Translated name, keyed by language code', verbose_name='name')),
                organization_field('scopes'),
            ],
            options={
                'verbose_name': 'scope',
                'verbose_name_plural': 'scopes',
                'default_permissions': [],
            },
        ),
        migrations.CreateModel(
            name='Category',
            fields=history_fields() + [
                ('name', models.JSONField(default=dict, help_text='Translated name, keyed by language code', verbose_name='name')),
                ('participatory_space', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='categories', to='common.participatoryspace', verbose_name='participatory space')),
            ],
            options={
                'verbose_name': 'category',
                'verbose_name_plural': 'categories',
                'default_permissions': [],
            },
        ),
        migrations.CreateModel(
            name='Meeting',
            fields=history_fields() + [
                ('title', models.JSONField(default=dict, help_text='The title of the meeting', verbose_name='Meeting Title')),
                ('description', models.JSONField(default=dict, help_text='Detailed description of the meeting', verbose_name='Description')),
                ('location', models.JSONField(blank=True, default=dict, help_text='Name of the place the meeting happens in', verbose_name='Location')),
                ('location_hints', models.JSONField(blank=True, default=dict, help_text='Directions to find the meeting place', verbose_name='Location Hints')),
                ('start_time', models.DateTimeField(help_text='When the meeting starts', verbose_name='Start Time')),
                ('end_time', models.DateTimeField(help_text='When the meeting ends', verbose_name='End Time')),
                ('address', models.CharField(blank=True, help_text='Street address used for geocoding', max_length=255, verbose_name='Address')),
                ('latitude', models.FloatField(blank=True, null=True, verbose_name='Latitude')),
                ('longitude', models.FloatField(blank=True, null=True, verbose_name='Longitude')),
                ('private_meeting', models.BooleanField(default=False, help_text='Whether only invited participants can see this meeting', verbose_name='Private Meeting')),
                ('transparent', models.BooleanField(default=True, help_text='Whether a private meeting is still listed publicly', verbose_name='Transparent')),
                ('transparent_type', models.CharField(blank=True, max_length=20, verbose_name='Transparency Type')),
                ('type_of_meeting', models.CharField(choices=[('in_person', 'In person'), ('online', 'Online'), ('hybrid', 'Hybrid')], default='in_person', max_length=20, verbose_name='Type of Meeting')),
                ('online_meeting_url', models.URLField(blank=True, help_text='URL to join the meeting (external platform)', verbose_name='Online Meeting URL')),
                ('show_iframe', models.BooleanField(default=False, help_text='Whether the online meeting is embedded in the meeting page', verbose_name='Show Iframe')),
                ('registration_type', models.CharField(choices=[('registration_disabled', 'Registration disabled'), ('on_this_platform', 'On this platform'), ('on_different_platform', 'On a different platform')], default='registration_disabled', max_length=30, verbose_name='Registration Type')),
                ('available_slots', models.PositiveIntegerField(default=0, help_text='Number of registrations accepted (0 for unlimited)', verbose_name='Available Slots')),
                ('registration_url', models.URLField(blank=True, help_text='URL of the external registration platform', verbose_name='Registration URL')),
                ('registration_terms', models.JSONField(blank=True, default=dict, verbose_name='Registration Terms')),
                ('customize_registration_email', models.BooleanField(default=False, verbose_name='Customize Registration Email')),
                ('registration_email_custom_content', models.JSONField(blank=True, default=dict, verbose_name='Registration Email Custom Content')),
                ('published_at', models.DateTimeField(blank=True, help_text='When the meeting was published, empty while unpublished', null=True, verbose_name='Published At')),
                ('author', models.ForeignKey(help_text='The organization that created this meeting', on_delete=django.db.models.deletion.CASCADE, related_name='authored_meetings', to='common.organization', verbose_name='Author')),
                ('category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='meetings', to='common.category', verbose_name='Category')),
                ('component', models.ForeignKey(help_text='The meetings component this meeting belongs to', on_delete=django.db.models.deletion.CASCADE, related_name='meetings', to='common.component', verbose_name='Component')),
                ('scope', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='meetings', to='common.scope', verbose_name='Scope')),
            ],
            options={
                'verbose_name': 'Meeting',
                'verbose_name_plural': 'Meetings',
                'ordering': ['-start_time'],
                'indexes': [
                    models.Index(fields=['component', 'start_time'], name='meeting_component_start_idx'),
                    models.Index(fields=['type_of_meeting'], name='meeting_type_idx'),
                    models.Index(fields=['registration_type'], name='meeting_registration_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(
                            models.Q(('latitude__isnull', True), ('longitude__isnull', True)),
                            models.Q(('latitude__isnull', False), ('longitude__isnull', False)),
                            _connector='OR',
                        ),
                        name='meeting_coordinates_pair',
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name='MeetingService',
            fields=history_fields() + [
                ('title', models.JSONField(default=dict, verbose_name='Title')),
                ('description', models.JSONField(blank=True, default=dict, verbose_name='Description')),
                ('position', models.PositiveIntegerField(default=0, help_text='Display order of the service inside its meeting', verbose_name='Position')),
                ('meeting', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='services', to='common.meeting', verbose_name='Meeting')),
            ],
            options={
                'verbose_name': 'Meeting Service',
                'verbose_name_plural': 'Meeting Services',
                'ordering': ['position'],
                'indexes': [models.Index(fields=['meeting', 'position'], name='service_meeting_position_idx')],
            },
        ),
        migrations.CreateModel(
            name='Questionnaire',
            fields=history_fields() + [
                ('title', models.JSONField(blank=True, default=dict, verbose_name='title')),
                ('description', models.JSONField(blank=True, default=dict, verbose_name='description')),
                ('tos', models.JSONField(blank=True, default=dict, verbose_name='terms of service')),
                ('published_at', models.DateTimeField(blank=True, null=True, verbose_name='published at')),
                ('meeting', models.OneToOneField(help_text='The meeting attendees register to with this questionnaire', on_delete=django.db.models.deletion.CASCADE, related_name='questionnaire', to='common.meeting', verbose_name='meeting')),
            ],
            options={
                'verbose_name': 'questionnaire',
                'verbose_name_plural': 'questionnaires',
                'default_permissions': [],
            },
        ),
        migrations.CreateModel(
            name='ResourceVersion',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, help_text='UUID primary key', primary_key=True, serialize=False, verbose_name='id')),
                ('item_type', models.CharField(help_text='App label and model name of the versioned resource', max_length=100, verbose_name='item type')),
                ('item_id', models.CharField(max_length=64, verbose_name='item id')),
                ('event', models.CharField(help_text='What happened to the resource (create, update, destroy)', max_length=20, verbose_name='event')),
                ('whodunnit', models.CharField(blank=True, help_text='Id of the user responsible for the change', max_length=64, verbose_name='whodunnit')),
                ('object_changes', models.JSONField(default=dict, encoder=django.core.serializers.json.DjangoJSONEncoder, verbose_name='object changes')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='created at')),
            ],
            options={
                'verbose_name': 'Resource Version',
                'verbose_name_plural': 'Resource Versions',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['item_type', 'item_id'], name='version_item_idx')],
            },
        ),
        migrations.CreateModel(
            name='ActionLog',
            fields=history_fields() + [
                ('action', models.CharField(max_length=50, verbose_name='action')),
                ('resource_type', models.CharField(max_length=100, verbose_name='resource type')),
                ('resource_id', models.CharField(max_length=64, verbose_name='resource id')),
                ('visibility', models.CharField(choices=[('all', 'All'), ('admin-only', 'Admin only'), ('public-only', 'Public only'), ('private-only', 'Private only')], default='admin-only', max_length=20, verbose_name='visibility')),
                ('extra', models.JSONField(default=dict, encoder=django.core.serializers.json.DjangoJSONEncoder, help_text='Additional context about the action', verbose_name='extra')),
                ('component', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='action_logs', to='common.component', verbose_name='component')),
                organization_field('actionlogs'),
                ('participatory_space', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='action_logs', to='common.participatoryspace', verbose_name='participatory space')),
                ('user', models.ForeignKey(blank=True, help_text='User who performed the action', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='action_logs', to=settings.AUTH_USER_MODEL, verbose_name='user')),
                ('version', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='action_log', to='common.resourceversion', verbose_name='version')),
            ],
            options={
                'verbose_name': 'Action Log',
                'verbose_name_plural': 'Action Logs',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['organization', 'created_at'], name='action_log_org_created_idx'),
                    models.Index(fields=['resource_type', 'resource_id'], name='action_log_resource_idx'),
                    models.Index(fields=['visibility'], name='action_log_visibility_idx'),
                ],
            },
        ),
    ]
