from django.db.models import Q
from django.views.decorators.http import require_GET, require_http_methods

from apps.core.api import dealership_required, get_owned_or_404, ok, ok_list, read_json
from apps.core.forms import bind_form, save_form
from apps.sales.models import SaleRecord
from apps.sales.serializers import sale_with_financials

from .forms import CustomerForm
from .models import Customer


def serialize_customer(c: Customer) -> dict:
    return {
        "id": c.id,
        "name": c.name,
        "email": c.email,
        "phone": c.phone,
        "address": c.address,
        "license_number": c.license_number,
        "notes": c.notes,
        "created_at": c.created_at,
        "updated_at": c.updated_at,
    }


@dealership_required
@require_http_methods(["GET", "POST"])
def customer_collection(request):
    if request.method == "POST":
        form = bind_form(CustomerForm, read_json(request))
        customer = save_form(form, dealership=request.dealership)
        return ok(serialize_customer(customer), status=201, message="Customer added successfully")

    qs = Customer.objects.filter(dealership=request.dealership)

    search = (request.GET.get("search") or request.GET.get("q") or "").strip()
    if search:
        qs = qs.filter(
            Q(name__icontains=search) |
            Q(phone__icontains=search) |
            Q(email__icontains=search)
        )

    return ok_list([serialize_customer(c) for c in qs.order_by("-created_at")])


@dealership_required
@require_http_methods(["GET", "PUT", "DELETE"])
def customer_detail(request, pk: int):
    customer = get_owned_or_404(Customer, request, pk, label="Customer")

    if request.method == "PUT":
        form = bind_form(CustomerForm, read_json(request), instance=customer)
        customer = save_form(form)
        return ok(serialize_customer(customer), message="Customer updated successfully")

    if request.method == "DELETE":
        customer.delete()
        return ok(message="Customer deleted successfully")

    return ok(serialize_customer(customer))


@dealership_required
@require_GET
def customer_purchases(request, pk: int):
    """
    Sales matched to the customer by phone number (sales keep their own copy
    of the buyer's details).
    """
    customer = get_owned_or_404(Customer, request, pk, label="Customer")

    sales = (
        SaleRecord.objects
        .filter(dealership=request.dealership, customer_phone=customer.phone)
        .select_related("car")
        .prefetch_related("car__service_records")
        .order_by("-sale_date")
    )
    return ok_list([sale_with_financials(s) for s in sales])
