# app/fields/defaults.py
from .types import Field, FieldValidation, ModuleName

EQUIPMENT_TYPES = ['Bomba', 'Motor', 'Compresor', 'Generador', 'Turbina', 'Intercambiador', 'Válvula']
CRITICALITY_LEVELS = ['Low', 'Medium', 'High', 'Critical']
EQUIPMENT_STATUSES = ['Operational', 'Maintenance', 'Out of Service', 'Retired']
MAINTENANCE_TYPES = ['Preventive', 'Corrective', 'Emergency', 'Predictive']
INVENTORY_CATEGORIES = ['Repuestos', 'Herramientas', 'Consumibles', 'Lubricantes']
FREQUENCIES = ['daily', 'weekly', 'monthly', 'quarterly', 'annually']
TASK_PRIORITIES = ['low', 'medium', 'high', 'critical']
WIDGET_TYPES = ['KPI', 'Chart', 'Table', 'Alert']

# (name, label, type, required, extra attributes); order follows position
DEFAULT_FIELD_TABLE = {
    ModuleName.EQUIPMENT: [
        ('name', 'Equipment Name', 'text', True, {'placeholder': 'Enter the equipment name'}),
        ('type', 'Equipment Type', 'select', True, {'options': EQUIPMENT_TYPES}),
        ('model', 'Model', 'text', False, {'placeholder': 'Equipment model'}),
        ('serialNumber', 'Serial Number', 'text', False, {'placeholder': 'Serial number'}),
        ('location', 'Location', 'text', True, {'placeholder': 'Equipment location'}),
        ('manufacturer', 'Manufacturer', 'text', False, {'placeholder': 'Equipment manufacturer'}),
        ('installationDate', 'Installation Date', 'date', False, {}),
        ('criticality', 'Criticality', 'select', True, {'options': CRITICALITY_LEVELS}),
        ('status', 'Status', 'select', True, {'options': EQUIPMENT_STATUSES}),
    ],
    ModuleName.WORKORDERS: [
        # options come from the equipment registry at render time
        ('equipmentId', 'Equipment', 'select', True, {}),
        ('type', 'Maintenance Type', 'select', True, {'options': MAINTENANCE_TYPES}),
        ('description', 'Description', 'textarea', True, {}),
        ('priority', 'Priority', 'select', True, {'options': CRITICALITY_LEVELS}),
        ('technician', 'Assigned Technician', 'text', False, {}),
        ('scheduledDate', 'Scheduled Date', 'date', False, {}),
        ('spares', 'Required Spares', 'textarea', False,
         {'placeholder': 'List of spare parts and materials needed'}),
        ('cost', 'Estimated Cost', 'number', False, {'validation': FieldValidation(min=0)}),
    ],
    ModuleName.INVENTORY: [
        ('name', 'Item Name', 'text', True, {}),
        ('category', 'Category', 'select', True, {'options': INVENTORY_CATEGORIES}),
        ('quantity', 'Quantity', 'number', True, {}),
        ('minStock', 'Minimum Stock', 'number', True, {}),
        ('unitCost', 'Unit Cost', 'number', True, {}),
    ],
    ModuleName.SCHEDULING: [
        ('taskName', 'Task Name', 'text', True, {}),
        ('frequency', 'Frequency', 'select', True, {'options': FREQUENCIES}),
        ('priority', 'Priority', 'select', True, {'options': TASK_PRIORITIES}),
        ('estimatedDuration', 'Estimated Duration (min)', 'number', True, {}),
    ],
    ModuleName.DASHBOARD: [
        ('widgetType', 'Widget Type', 'select', True, {'options': WIDGET_TYPES}),
        ('title', 'Title', 'text', True, {}),
    ],
}


def build_default_fields(table=None):
    """Build the system field set for every module from a static table.

    The result is meant to be created once at startup and handed to the
    FieldSchemaStore; pass an alternate `table` to run with a different schema.
    """
    table = DEFAULT_FIELD_TABLE if table is None else table
    defaults = {}
    for module in ModuleName:
        fields = []
        for position, (name, label, field_type, required, extra) in enumerate(table.get(module, []), start=1):
            fields.append(Field(
                id=name,
                name=name,
                label=label,
                type=field_type,
                required=required,
                placeholder=extra.get('placeholder'),
                options=list(extra['options']) if 'options' in extra else None,
                default_value=extra.get('default_value'),
                validation=extra.get('validation'),
                order=position,
                is_system=True,
            ))
        defaults[module] = fields
    return defaults
