"""Initial schema for the ELI campus security platform.

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ENUM_TYPES = {
    'user_role': ('user', 'admin', 'operator', 'viewer'),
    'zone_type': ('classroom', 'hallway', 'stairwell', 'entry', 'office', 'lab', 'common', 'restroom', 'other'),
    'camera_type': ('dome', 'bullet', 'ptz', 'fisheye', 'thermal'),
    'equipment_status': ('online', 'offline', 'maintenance', 'error'),
    'access_reader_type': ('entry', 'exit', 'bidirectional'),
    'sensor_type': ('motion', 'glass_break', 'smoke', 'temperature', 'occupancy'),
    'sensor_status': ('online', 'offline', 'triggered', 'maintenance'),
    'entity_type': ('person', 'device', 'vehicle', 'unknown'),
    'entity_role': ('staff', 'student', 'visitor', 'contractor', 'unknown'),
    'location_source': ('wifi', 'rfid', 'facial', 'phone', 'motion', 'manual'),
    'event_type': (
        'camera_alert', 'access_entry', 'access_denied', 'motion_detect', 'wifi_probe',
        'facial_match', 'weapon_detect', 'anomaly', 'crowd_gather', 'person_down',
        'intrusion', 'system',
    ),
    'severity': ('info', 'low', 'medium', 'high', 'critical'),
    'alert_type': ('weapon', 'intrusion', 'anomaly', 'crowd', 'access_violation', 'system', 'person_down', 'fire'),
    'alert_severity': ('low', 'medium', 'high', 'critical'),
    'alert_status': ('active', 'acknowledged', 'investigating', 'resolved', 'false_alarm'),
    'incident_status': ('open', 'in_progress', 'resolved', 'closed'),
    'incident_priority': ('low', 'medium', 'high', 'critical'),
}


def enum(name: str) -> postgresql.ENUM:
    """Reference an enum type created at the top of upgrade()."""
    return postgresql.ENUM(*ENUM_TYPES[name], name=name, create_type=False)


def timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime, server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime, server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    # Create ENUM types
    for name, values in ENUM_TYPES.items():
        quoted = ", ".join(f"'{v}'" for v in values)
        op.execute(f"CREATE TYPE {name} AS ENUM ({quoted})")

    # Users
    op.create_table(
        'users',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('open_id', sa.String(64), nullable=False, unique=True),
        sa.Column('username', sa.String(255), nullable=True),
        sa.Column('name', sa.Text, nullable=True),
        sa.Column('email', sa.String(320), nullable=True),
        sa.Column('login_method', sa.String(64), nullable=True),
        sa.Column('role', enum('user_role'), nullable=False, server_default='user'),
        *timestamps(),
        sa.Column('last_signed_in', sa.DateTime, server_default=sa.text('now()'), nullable=False),
    )

    # Campus layout
    op.create_table(
        'buildings',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('code', sa.String(50), nullable=True),
        sa.Column('address', sa.Text, nullable=True),
        sa.Column('floors_count', sa.Integer, nullable=True, server_default='1'),
        sa.Column('latitude', sa.Numeric(10, 8), nullable=True),
        sa.Column('longitude', sa.Numeric(11, 8), nullable=True),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('image_url', sa.Text, nullable=True),
        *timestamps(),
    )

    op.create_table(
        'floors',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('building_id', sa.Integer, sa.ForeignKey('buildings.id', ondelete='CASCADE'), nullable=False),
        sa.Column('level', sa.Integer, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('floorplan_url', sa.Text, nullable=True),
        sa.Column('floorplan_width', sa.Integer, nullable=True),
        sa.Column('floorplan_height', sa.Integer, nullable=True),
        sa.Column('scale_px_per_meter', sa.Numeric(10, 4), nullable=True),
        *timestamps(),
    )
    op.create_index('ix_floors_building_id', 'floors', ['building_id'])

    op.create_table(
        'zones',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('floor_id', sa.Integer, sa.ForeignKey('floors.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', enum('zone_type'), nullable=True, server_default='other'),
        sa.Column('polygon_points', sa.JSON, nullable=True),
        sa.Column('color', sa.String(20), nullable=True),
        sa.Column('created_at', sa.DateTime, server_default=sa.text('now()'), nullable=False),
    )

    # Equipment
    op.create_table(
        'cameras',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('building_id', sa.Integer, sa.ForeignKey('buildings.id', ondelete='CASCADE'), nullable=False),
        sa.Column('floor_id', sa.Integer, sa.ForeignKey('floors.id', ondelete='SET NULL'), nullable=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', enum('camera_type'), nullable=True, server_default='dome'),
        sa.Column('rtsp_url', sa.Text, nullable=True),
        sa.Column('hls_url', sa.Text, nullable=True),
        sa.Column('snapshot_url', sa.Text, nullable=True),
        sa.Column('x', sa.Numeric(10, 4), nullable=True),
        sa.Column('y', sa.Numeric(10, 4), nullable=True),
        sa.Column('fov_degrees', sa.Integer, nullable=True, server_default='90'),
        sa.Column('rotation', sa.Integer, nullable=True, server_default='0'),
        sa.Column('status', enum('equipment_status'), nullable=True, server_default='online'),
        sa.Column('has_ai', sa.Boolean, nullable=True, server_default='false'),
        sa.Column('last_health_check', sa.DateTime, nullable=True),
        sa.Column('metadata', sa.JSON, nullable=True),
        *timestamps(),
    )
    op.create_index('ix_cameras_building_id', 'cameras', ['building_id'])
    op.create_index('ix_cameras_floor_id', 'cameras', ['floor_id'])
    op.create_index('ix_cameras_status', 'cameras', ['status'])

    op.create_table(
        'access_readers',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('building_id', sa.Integer, sa.ForeignKey('buildings.id', ondelete='CASCADE'), nullable=False),
        sa.Column('floor_id', sa.Integer, sa.ForeignKey('floors.id', ondelete='SET NULL'), nullable=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', enum('access_reader_type'), nullable=True, server_default='bidirectional'),
        sa.Column('x', sa.Numeric(10, 4), nullable=True),
        sa.Column('y', sa.Numeric(10, 4), nullable=True),
        sa.Column('external_id', sa.String(255), nullable=True),
        sa.Column('status', enum('equipment_status'), nullable=True, server_default='online'),
        sa.Column('created_at', sa.DateTime, server_default=sa.text('now()'), nullable=False),
    )

    op.create_table(
        'sensors',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('building_id', sa.Integer, sa.ForeignKey('buildings.id', ondelete='CASCADE'), nullable=False),
        sa.Column('floor_id', sa.Integer, sa.ForeignKey('floors.id', ondelete='SET NULL'), nullable=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('type', enum('sensor_type'), nullable=True, server_default='motion'),
        sa.Column('x', sa.Numeric(10, 4), nullable=True),
        sa.Column('y', sa.Numeric(10, 4), nullable=True),
        sa.Column('external_id', sa.String(255), nullable=True),
        sa.Column('status', enum('sensor_status'), nullable=True, server_default='online'),
        sa.Column('created_at', sa.DateTime, server_default=sa.text('now()'), nullable=False),
    )

    op.create_table(
        'wifi_access_points',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('building_id', sa.Integer, sa.ForeignKey('buildings.id', ondelete='CASCADE'), nullable=False),
        sa.Column('floor_id', sa.Integer, sa.ForeignKey('floors.id', ondelete='SET NULL'), nullable=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('bssid', sa.String(17), nullable=True),
        sa.Column('x', sa.Numeric(10, 4), nullable=True),
        sa.Column('y', sa.Numeric(10, 4), nullable=True),
        sa.Column('coverage_radius', sa.Integer, nullable=True, server_default='30'),
        sa.Column('status', enum('equipment_status'), nullable=True, server_default='online'),
        sa.Column('created_at', sa.DateTime, server_default=sa.text('now()'), nullable=False),
    )

    # Tracking
    op.create_table(
        'tracked_entities',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('type', enum('entity_type'), nullable=True, server_default='unknown'),
        sa.Column('identifier_hash', sa.String(255), nullable=True),
        sa.Column('display_name', sa.String(255), nullable=True),
        sa.Column('role', enum('entity_role'), nullable=True, server_default='unknown'),
        sa.Column('is_watchlist', sa.Boolean, nullable=True, server_default='false'),
        sa.Column('risk_score', sa.Integer, nullable=True, server_default='0'),
        sa.Column('last_seen_at', sa.DateTime, nullable=True),
        sa.Column('last_floor_id', sa.Integer, nullable=True),
        sa.Column('last_x', sa.Numeric(10, 4), nullable=True),
        sa.Column('last_y', sa.Numeric(10, 4), nullable=True),
        sa.Column('metadata', sa.JSON, nullable=True),
        *timestamps(),
    )
    op.create_index('ix_tracked_entities_last_floor', 'tracked_entities', ['last_floor_id', 'last_seen_at'])

    op.create_table(
        'location_events',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('entity_id', sa.Integer, sa.ForeignKey('tracked_entities.id', ondelete='CASCADE'), nullable=False),
        sa.Column('floor_id', sa.Integer, sa.ForeignKey('floors.id', ondelete='CASCADE'), nullable=False),
        sa.Column('source_type', enum('location_source'), nullable=False),
        sa.Column('x', sa.Numeric(10, 4), nullable=False),
        sa.Column('y', sa.Numeric(10, 4), nullable=False),
        sa.Column('confidence', sa.Numeric(5, 4), nullable=True, server_default='0.8'),
        sa.Column('timestamp', sa.DateTime, server_default=sa.text('now()'), nullable=False),
        sa.Column('metadata', sa.JSON, nullable=True),
    )
    op.create_index('ix_location_events_entity_ts', 'location_events', ['entity_id', 'timestamp'])

    # Security workflow
    op.create_table(
        'events',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('type', enum('event_type'), nullable=False),
        sa.Column('severity', enum('severity'), nullable=True, server_default='info'),
        sa.Column('source_type', sa.String(50), nullable=True),
        sa.Column('source_id', sa.Integer, nullable=True),
        sa.Column('building_id', sa.Integer, nullable=True),
        sa.Column('floor_id', sa.Integer, nullable=True),
        sa.Column('x', sa.Numeric(10, 4), nullable=True),
        sa.Column('y', sa.Numeric(10, 4), nullable=True),
        sa.Column('title', sa.String(255), nullable=True),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('metadata', sa.JSON, nullable=True),
        sa.Column('incident_id', sa.Integer, nullable=True),
        sa.Column('timestamp', sa.DateTime, server_default=sa.text('now()'), nullable=False),
        sa.Column('created_at', sa.DateTime, server_default=sa.text('now()'), nullable=False),
    )
    op.create_index('ix_events_timestamp', 'events', ['timestamp'])

    op.create_table(
        'alerts',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('type', enum('alert_type'), nullable=False),
        sa.Column('severity', enum('alert_severity'), nullable=True, server_default='medium'),
        sa.Column('status', enum('alert_status'), nullable=True, server_default='active'),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('building_id', sa.Integer, nullable=True),
        sa.Column('floor_id', sa.Integer, nullable=True),
        sa.Column('x', sa.Numeric(10, 4), nullable=True),
        sa.Column('y', sa.Numeric(10, 4), nullable=True),
        sa.Column('ai_confidence', sa.Numeric(5, 4), nullable=True),
        sa.Column('source_event_id', sa.Integer, nullable=True),
        sa.Column('assigned_to', sa.Integer, nullable=True),
        sa.Column('acknowledged_by', sa.Integer, nullable=True),
        sa.Column('acknowledged_at', sa.DateTime, nullable=True),
        sa.Column('resolved_by', sa.Integer, nullable=True),
        sa.Column('resolved_at', sa.DateTime, nullable=True),
        sa.Column('resolution_notes', sa.Text, nullable=True),
        sa.Column('metadata', sa.JSON, nullable=True),
        *timestamps(),
    )
    op.create_index('ix_alerts_status', 'alerts', ['status', 'severity'])
    op.create_index('ix_alerts_created_at', 'alerts', ['created_at'])

    op.create_table(
        'incidents',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('status', enum('incident_status'), nullable=True, server_default='open'),
        sa.Column('priority', enum('incident_priority'), nullable=True, server_default='medium'),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('building_id', sa.Integer, nullable=True),
        sa.Column('floor_id', sa.Integer, nullable=True),
        sa.Column('commander_id', sa.Integer, nullable=True),
        sa.Column('assigned_to', sa.Integer, nullable=True),
        sa.Column('tags', sa.JSON, nullable=True),
        sa.Column('timeline', sa.JSON, nullable=True),
        sa.Column('linked_alert_ids', sa.JSON, nullable=True),
        sa.Column('linked_event_ids', sa.JSON, nullable=True),
        sa.Column('linked_entity_ids', sa.JSON, nullable=True),
        *timestamps(),
        sa.Column('resolved_at', sa.DateTime, nullable=True),
        sa.Column('closed_at', sa.DateTime, nullable=True),
    )
    op.create_index('ix_incidents_created_at', 'incidents', ['created_at'])

    # Platform
    op.create_table(
        'config',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('key', sa.String(255), nullable=False, unique=True),
        sa.Column('value', sa.JSON, nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('updated_at', sa.DateTime, server_default=sa.text('now()'), nullable=False),
    )

    op.create_table(
        'audit_logs',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('user_id', sa.Integer, nullable=True),
        sa.Column('action', sa.String(100), nullable=False),
        sa.Column('entity_type', sa.String(50), nullable=True),
        sa.Column('entity_id', sa.Integer, nullable=True),
        sa.Column('details', sa.JSON, nullable=True),
        sa.Column('ip_address', sa.String(45), nullable=True),
        sa.Column('timestamp', sa.DateTime, server_default=sa.text('now()'), nullable=False),
    )
    op.create_index('ix_audit_logs_timestamp', 'audit_logs', ['timestamp'])

    op.create_table(
        'demo_scenarios',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('duration', sa.Integer, nullable=True),
        sa.Column('events', sa.JSON, nullable=True),
        sa.Column('is_active', sa.Boolean, nullable=True, server_default='false'),
        sa.Column('created_at', sa.DateTime, server_default=sa.text('now()'), nullable=False),
    )


def downgrade() -> None:
    # Drop tables
    op.drop_table('demo_scenarios')
    op.drop_table('audit_logs')
    op.drop_table('config')
    op.drop_table('incidents')
    op.drop_table('alerts')
    op.drop_table('events')
    op.drop_table('location_events')
    op.drop_table('tracked_entities')
    op.drop_table('wifi_access_points')
    op.drop_table('sensors')
    op.drop_table('access_readers')
    op.drop_table('cameras')
    op.drop_table('zones')
    op.drop_table('floors')
    op.drop_table('buildings')
    op.drop_table('users')

    # Drop ENUM types
    for name in reversed(list(ENUM_TYPES)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
