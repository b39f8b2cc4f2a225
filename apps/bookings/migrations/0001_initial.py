import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("directory", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "meeting_date",
                    models.DateField(help_text="Calendar date, interpreted in the server time zone."),
                ),
                ("start_time", models.TimeField()),
                ("end_time", models.TimeField()),
                (
                    "total_participants",
                    models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)]),
                ),
                (
                    "total_consumption",
                    models.PositiveIntegerField(
                        default=0,
                        help_text="Informational count, not checked against the selected items.",
                    ),
                ),
                ("notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "meeting_room",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="bookings",
                        to="directory.meetingroom",
                    ),
                ),
                (
                    "unit",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="bookings",
                        to="directory.unit",
                    ),
                ),
            ],
            options={
                "verbose_name": "Booking",
                "verbose_name_plural": "Bookings",
                "db_table": "bookings",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="BookingConsumption",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "booking",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="consumption_links",
                        to="bookings.booking",
                    ),
                ),
                (
                    "consumption",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="booking_links",
                        to="directory.consumption",
                    ),
                ),
            ],
            options={
                "verbose_name": "Booking consumption",
                "verbose_name_plural": "Booking consumptions",
                "db_table": "booking_consumptions",
            },
        ),
        migrations.AddField(
            model_name="booking",
            name="consumptions",
            field=models.ManyToManyField(
                blank=True,
                related_name="bookings",
                through="bookings.BookingConsumption",
                to="directory.consumption",
            ),
        ),
        migrations.AddConstraint(
            model_name="bookingconsumption",
            constraint=models.UniqueConstraint(
                fields=("booking", "consumption"),
                name="unique_booking_consumption",
            ),
        ),
        migrations.AddIndex(
            model_name="booking",
            index=models.Index(
                fields=["meeting_room", "meeting_date", "start_time"],
                name="booking_room_date_start_idx",
            ),
        ),
        migrations.AddIndex(
            model_name="booking",
            index=models.Index(fields=["meeting_date"], name="booking_meeting_date_idx"),
        ),
        migrations.AddConstraint(
            model_name="booking",
            constraint=models.CheckConstraint(
                condition=models.Q(("end_time__gt", models.F("start_time"))),
                name="booking_valid_time_range",
            ),
        ),
        migrations.AddConstraint(
            model_name="booking",
            constraint=models.CheckConstraint(
                condition=models.Q(("total_participants__gte", 1)),
                name="booking_positive_participants",
            ),
        ),
    ]
