"""Application service: Show Customer use case (query)."""

from __future__ import annotations

from rmg.application.dto import CustomerDTO
from rmg.domain.model.customer import Customer


class ShowCustomerHandler:

    def handle(self, customer: Customer) -> CustomerDTO:
        return CustomerDTO(
            customer_id=customer.customer_id,
            name=customer.name,
            email=customer.email,
            phone=customer.phone,
            total_orders=len(customer.orders),
        )
