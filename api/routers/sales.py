"""
Sales API Endpoints.

Endpoints for listing, recording and deleting sales.
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from api.dependencies import get_sales_book
from api.models import SaleCreateRequest, SaleListResponse, SaleResponse, ValidationErrorResponse
from domain.sale import Sale
from domain.validation import ValidationError
from services.sales_book import SalesBook

router = APIRouter()


def _to_response(sale: Sale) -> SaleResponse:
    return SaleResponse(
        sale_id=sale.sale_id,
        customer_name=sale.customer_name,
        product=sale.product,
        amount=sale.amount,
        date=sale.date,
    )


@router.get(
    "/sales",
    response_model=SaleListResponse,
    summary="List Sales",
    description="All recorded sales, oldest first."
)
def list_sales(book: SalesBook = Depends(get_sales_book)):
    try:
        sales = book.list_all()
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to list sales: {str(e)}"
        )

    return SaleListResponse(
        items=[_to_response(sale) for sale in sales],
        total_count=len(sales)
    )


@router.post(
    "/sales",
    response_model=SaleResponse,
    status_code=201,
    responses={422: {"model": ValidationErrorResponse}},
    summary="Record Sale",
    description="Validate add-sale form input and store a new sale."
)
def create_sale(request: SaleCreateRequest, book: SalesBook = Depends(get_sales_book)):
    """
    Record a new sale.

    **Validation:**
    - customer_name and product must not be empty
    - amount must be a number
    - date (optional, defaults to now) must be between 2000-01-01 and now

    **Failure response (422):**
    ```json
    {
      "detail": {
        "errors": {"amount": "Please enter a valid amount"}
      }
    }
    ```
    """
    try:
        sale = book.add(
            customer_name=request.customer_name,
            product=request.product,
            amount=request.amount,
            date=request.date,
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"errors": e.errors}
        )
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to record sale: {str(e)}"
        )

    return _to_response(sale)


@router.delete(
    "/sales/{sale_id}",
    status_code=204,
    response_class=Response,
    summary="Delete Sale",
    description="Delete a sale by id. Deleting an unknown id is a no-op."
)
def delete_sale(sale_id: int, book: SalesBook = Depends(get_sales_book)):
    try:
        book.delete(sale_id)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to delete sale: {str(e)}"
        )

    return Response(status_code=204)
