from __future__ import annotations

from tender_sync.adapters.http.dtos import PagedTenderResponseDTO, TenderDTO
from tender_sync.domain.tender import PageDescriptor, Tender, TenderPage


class TenderMapper:
    """Maps between wire DTOs and domain models for tenders."""

    @staticmethod
    def to_domain(dto: TenderDTO) -> Tender:
        """
        Converts a wire listing to the domain Tender.

        Extra wire keys end up in ``display_fields``.

        Args:
            dto: Wire listing

        Returns:
            Tender: Immutable domain listing
        """
        return Tender(
            tender_id=dto.tender_id,
            management_no=dto.cltr_mnmt_no,
            title=dto.tender_title,
            organization=dto.organization,
            deadline=dto.deadline,
            pbct_no=dto.pbct_no,
            history_no=dto.cltr_hstr_no,
            bid_number=dto.bid_number,
            goods_name=dto.goods_name,
            announcement_date=dto.announcement_date,
            display_fields=dict(dto.model_extra or {}),
        )

    @staticmethod
    def to_dto(tender: Tender) -> TenderDTO:
        return TenderDTO.model_validate(
            {
                **tender.display_fields,
                "tenderId": tender.tender_id,
                "pbctNo": tender.pbct_no,
                "cltrHstrNo": tender.history_no,
                "cltrMnmtNo": tender.management_no,
                "tenderTitle": tender.title,
                "organization": tender.organization,
                "bidNumber": tender.bid_number,
                "goodsName": tender.goods_name,
                "announcementDate": tender.announcement_date,
                "deadline": tender.deadline,
            }
        )

    @staticmethod
    def to_domain_page(dto: PagedTenderResponseDTO | None, requested_rows: int) -> TenderPage:
        """
        Converts a paged response to a TenderPage.

        An absent payload becomes the empty page; absent fields default one
        by one. Page number and size are the server's when present.

        Args:
            dto: Parsed response, or None when the body was absent
            requested_rows: Page size that was requested

        Returns:
            TenderPage: Listings with the server's pagination metadata
        """
        if dto is None:
            return TenderPage.empty(requested_rows)

        return TenderPage(
            tenders=tuple(TenderMapper.to_domain(item) for item in dto.tenders or []),
            page=PageDescriptor(
                page_no=dto.page_no or 1,
                num_of_rows=dto.num_of_rows or requested_rows,
                total_count=dto.total_count or 0,
            ),
        )

    @staticmethod
    def to_response(page: TenderPage) -> PagedTenderResponseDTO:
        return PagedTenderResponseDTO(
            tenders=[TenderMapper.to_dto(tender) for tender in page.tenders],
            total_count=page.page.total_count,
            page_no=page.page.page_no,
            num_of_rows=page.page.num_of_rows,
        )
