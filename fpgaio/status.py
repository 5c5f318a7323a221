"""Status codes shared by the device drivers."""

from enum import IntEnum, unique


@unique
class Status(IntEnum):
    """Driver status codes.

    Common codes occupy 0-500, common components 501-1000 and
    device-specific codes 1001-4095.
    """

    # Common status codes for all device drivers
    SUCCESS = 0
    FAILURE = 1
    DEVICE_NOT_FOUND = 2
    DEVICE_BLOCK_NOT_FOUND = 3
    INVALID_VERSION = 4
    DEVICE_IS_STARTED = 5
    DEVICE_IS_STOPPED = 6
    FIFO_ERROR = 7
    RESET_ERROR = 8
    DMA_ERROR = 9
    NOT_POLLED = 10
    FIFO_NO_ROOM = 11
    BUFFER_TOO_SMALL = 12
    NO_DATA = 13
    REGISTER_ERROR = 14
    INVALID_PARAM = 15
    NOT_SGDMA = 16
    LOOPBACK_ERROR = 17
    NO_CALLBACK = 18
    NO_FEATURE = 19
    NOT_INTERRUPT = 20
    DEVICE_BUSY = 21
    ERROR_COUNT_MAX = 22
    IS_STARTED = 23
    IS_STOPPED = 24
    DATA_LOST = 26
    RECV_ERROR = 27
    SEND_ERROR = 28
    NOT_ENABLED = 29
    NO_ACCESS = 30
    TIMEOUT = 31
    GLITCH_ERROR = 32

    # Utility components
    MEMTEST_FAILED = 401

    # Packet FIFO
    PFIFO_LACK_OF_DATA = 501
    PFIFO_NO_ROOM = 502
    PFIFO_BAD_REG_VALUE = 503
    PFIFO_ERROR = 504
    PFIFO_DEADLOCK = 505

    # DMA
    DMA_TRANSFER_ERROR = 511
    DMA_RESET_REGISTER_ERROR = 512
    DMA_SG_LIST_EMPTY = 513
    DMA_SG_IS_STARTED = 514
    DMA_SG_IS_STOPPED = 515
    DMA_SG_LIST_FULL = 517
    DMA_SG_BD_LOCKED = 518
    DMA_SG_NOTHING_TO_COMMIT = 519
    DMA_SG_COUNT_EXCEEDED = 521
    DMA_SG_LIST_EXISTS = 522
    DMA_SG_NO_LIST = 523
    DMA_SG_BD_NOT_COMMITTED = 524
    DMA_SG_NO_DATA = 525
    DMA_SG_LIST_ERROR = 526
    DMA_BD_ERROR = 527

    # IPIF
    IPIF_REG_WIDTH_ERROR = 531
    IPIF_RESET_REGISTER_ERROR = 532
    IPIF_DEVICE_STATUS_ERROR = 533
    IPIF_DEVICE_ACK_ERROR = 534
    IPIF_DEVICE_ENABLE_ERROR = 535
    IPIF_IP_STATUS_ERROR = 536
    IPIF_IP_ACK_ERROR = 537
    IPIF_IP_ENABLE_ERROR = 538
    IPIF_DEVICE_PENDING_ERROR = 539
    IPIF_DEVICE_ID_ERROR = 540
    IPIF_ERROR = 541

    # Ethernet
    EMAC_MEMORY_SIZE_ERROR = 1001
    EMAC_MEMORY_ALLOC_ERROR = 1002
    EMAC_MII_READ_ERROR = 1003
    EMAC_MII_BUSY = 1004
    EMAC_OUT_OF_BUFFERS = 1005
    EMAC_PARSE_ERROR = 1006
    EMAC_COLLISION_ERROR = 1007

    # UART
    UART_INIT_ERROR = 1051
    UART_START_ERROR = 1052
    UART_CONFIG_ERROR = 1053
    UART_TEST_FAIL = 1054
    UART_BAUD_ERROR = 1055
    UART_BAUD_RANGE = 1056

    # IIC
    IIC_SELFTEST_FAILED = 1076
    IIC_BUS_BUSY = 1077
    IIC_GENERAL_CALL_ADDRESS = 1078
    IIC_STAND_REG_RESET_ERROR = 1079
    IIC_TX_FIFO_REG_RESET_ERROR = 1080
    IIC_RX_FIFO_REG_RESET_ERROR = 1081
    IIC_TBA_REG_RESET_ERROR = 1082
    IIC_CR_READBACK_ERROR = 1083
    IIC_DTR_READBACK_ERROR = 1084
    IIC_DRR_READBACK_ERROR = 1085
    IIC_ADR_READBACK_ERROR = 1086
    IIC_TBA_READBACK_ERROR = 1087
    IIC_NOT_SLAVE = 1088
    IIC_ARB_LOST = 1089

    # ATMC
    ATMC_ERROR_COUNT_MAX = 1101

    # Flash
    FLASH_BUSY = 1126
    FLASH_READY = 1127
    FLASH_ERROR = 1128
    FLASH_ERASE_SUSPENDED = 1129
    FLASH_WRITE_SUSPENDED = 1130
    FLASH_PART_NOT_SUPPORTED = 1131
    FLASH_NOT_SUPPORTED = 1132
    FLASH_TOO_MANY_REGIONS = 1133
    FLASH_TIMEOUT_ERROR = 1134
    FLASH_ADDRESS_ERROR = 1135
    FLASH_ALIGNMENT_ERROR = 1136
    FLASH_BLOCKING_CALL_ERROR = 1137
    FLASH_CFI_QUERY_ERROR = 1138

    # SPI
    SPI_MODE_FAULT = 1151
    SPI_TRANSFER_DONE = 1152
    SPI_TRANSMIT_UNDERRUN = 1153
    SPI_RECEIVE_OVERRUN = 1154
    SPI_NO_SLAVE = 1155
    SPI_TOO_MANY_SLAVES = 1156
    SPI_NOT_MASTER = 1157
    SPI_SLAVE_ONLY = 1158
    SPI_SLAVE_MODE_FAULT = 1159
    SPI_SLAVE_MODE = 1160
    SPI_RECEIVE_NOT_EMPTY = 1161
    SPI_COMMAND_ERROR = 1162
    SPI_POLL_DONE = 1163

    # OPB arbiter
    OPBARB_INVALID_PRIORITY = 1176
    OPBARB_NOT_SUSPENDED = 1177
    OPBARB_PARK_NOT_ENABLED = 1178
    OPBARB_NOT_FIXED_PRIORITY = 1179

    # Interrupt controller
    INTC_FAIL_SELFTEST = 1201
    INTC_CONNECT_ERROR = 1202

    # Timer/counter
    TMRCTR_TIMER_FAILED = 1226

    # Watchdog timebase
    WDTTB_TIMER_FAILED = 1251

    # PLB arbiter and bridges
    PLBARB_FAIL_SELFTEST = 1276
    PLB2OPB_FAIL_SELFTEST = 1301
    OPB2PLB_FAIL_SELFTEST = 1326

    # SysAce
    SYSACE_NO_LOCK = 1351

    # PCI bridge
    PCI_INVALID_ADDRESS = 1361

    # FlexRay
    FR_TX_ERROR = 1400
    FR_TX_BUSY = 1401
    FR_BUF_LOCKED = 1402
    FR_NO_BUF = 1403

    # USB
    USB_ALREADY_CONFIGURED = 1410
    USB_BUF_ALIGN_ERROR = 1411
    USB_NO_DESC_AVAILABLE = 1412
    USB_BUF_TOO_BIG = 1413
    USB_NO_BUF = 1414

    # HWICAP
    HWICAP_WRITE_DONE = 1421

    # AXI VDMA
    VDMA_MISMATCH_ERROR = 1430

    # NAND flash
    NAND_BUSY = 1441
    NAND_READY = 1442
    NAND_ERROR = 1443
    NAND_PART_NOT_SUPPORTED = 1444
    NAND_OPT_NOT_SUPPORTED = 1445
    NAND_TIMEOUT_ERROR = 1446
    NAND_ADDRESS_ERROR = 1447
    NAND_ALIGNMENT_ERROR = 1448
    NAND_PARAM_PAGE_ERROR = 1449
    NAND_CACHE_ERROR = 1450
    NAND_WRITE_PROTECTED = 1451