LOG_MAX_SIZE_MEGABYTES = 10
COMPRESSION = "zip"
LOGFILE_DATE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} [{level:<8}] {message}"
DISPLAY_DATE_FORMAT = "{time:HH:mm:ss} [{level:<8}] {message}"
